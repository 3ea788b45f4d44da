from app.settings.config import settings
from app.settings.logging_config import setup_logging

bind = f"{settings.app.host}:{settings.app.port}"
workers = settings.app.workers_num
worker_class = "uvicorn.workers.UvicornWorker"

# Логирование настраивается через dictConfig, свои обработчики gunicorn не нужны
setup_logging()
accesslog = None
errorlog = None
