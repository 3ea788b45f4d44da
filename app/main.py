from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from slowapi.middleware import SlowAPIASGIMiddleware

from app.api.v1.limiter import limiter
from app.api.v1.routers.base import router as base_router
from app.common.logger import LoggerType
from app.domain.exception_handler import exception_config
from app.infrastructure.ioc.api_ioc import ApiSlimProvider, HealthCheckProvider
from app.infrastructure.providers import (
    DatabaseProvider,
    LoggerProvider,
    RedisProvider,
    StorageProvider,
)
from app.settings.config import (
    HealthCheckSettings,
    PostgresSettings,
    RedisSettings,
    StorageSettings,
    settings,
)
from app.settings.logging_config import setup_logging


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Закрытие соединений контейнера при остановке"""
    yield
    await application.state.dishka_container.close()


def create_app() -> FastAPI:
    """Инициализация приложения"""
    application = FastAPI(
        title="Messenger Health", root_path=settings.app.prefix, lifespan=lifespan
    )
    container = make_async_container(
        ApiSlimProvider(),
        FastapiProvider(),
        LoggerProvider(),
        DatabaseProvider(),
        RedisProvider(),
        StorageProvider(),
        HealthCheckProvider(),
        context={
            PostgresSettings: settings.database,
            RedisSettings: settings.redis,
            StorageSettings: settings.storage,
            HealthCheckSettings: settings.health,
            LoggerType: LoggerType.APP,
        },
    )
    setup_dishka(container, application)
    application.include_router(base_router)
    application.state.limiter = limiter
    application.add_middleware(SlowAPIASGIMiddleware)

    for exception, handler in exception_config.items():
        application.add_exception_handler(exception, handler)
    return application


setup_logging()

app = create_app()
