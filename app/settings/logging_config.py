import logging
import os
from logging.config import dictConfig

from app.settings.config import settings

APP_LOGGERS = ("app", "gunicorn.error", "uvicorn.error")
ACCESS_LOGGERS = ("gunicorn.access", "uvicorn.access")


def _file_handler(path: str, formatter: str) -> dict:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return {
        "class": "logging.handlers.WatchedFileHandler",
        "formatter": formatter,
        "filename": path,
    }


def setup_logging() -> None:
    """Настраивает логирование через dictConfig для APP, access-логов и Warnings.

    Логгеры gunicorn и uvicorn пишут в те же обработчики, что и приложение,
    собственные обработчики gunicorn отключены в gunicorn_conf.
    """
    level = settings.app.log_level.upper()
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    }
    app_handlers = ["console"]
    access_handlers = ["console"]

    if settings.app.logs_path is not None:
        handlers["app_file"] = _file_handler(settings.app.logs_path, "default")
        app_handlers.append("app_file")
    if settings.app.logs_access_path is not None:
        handlers["access_file"] = _file_handler(settings.app.logs_access_path, "access")
        access_handlers.append("access_file")

    loggers = {
        name: {"handlers": app_handlers, "level": level, "propagate": False}
        for name in APP_LOGGERS
    }
    loggers.update(
        {
            name: {"handlers": access_handlers, "level": "INFO", "propagate": False}
            for name in ACCESS_LOGGERS
        }
    )
    loggers["py.warnings"] = {
        "handlers": app_handlers,
        "level": "WARNING",
        "propagate": False,
    }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s [%(process)d] [%(levelname)s]: %(message)s"
                },
                "access": {"format": "%(asctime)s [%(process)d] %(message)s"},
            },
            "handlers": handlers,
            "loggers": loggers,
        }
    )
    logging.captureWarnings(True)

    logging.getLogger("app").info(
        f"Логирование настроено. Уровень: {level}, "
        f"файл APP: {settings.app.logs_path or '-'}, "
        f"файл access: {settings.app.logs_access_path or '-'}"
    )
