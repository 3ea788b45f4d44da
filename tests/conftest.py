from collections.abc import AsyncGenerator

import pytest
from dishka import AsyncContainer, Provider, Scope, from_context, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from faker import Faker
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from slowapi.middleware import SlowAPIASGIMiddleware

from app.api.v1.limiter import limiter
from app.api.v1.routers.base import router as base_router
from app.common.logger import LoggerType, MessengerLogger
from app.domain.exception_handler import exception_config
from app.infrastructure.healthchecks.interfaces import IHealthCheck
from app.infrastructure.healthchecks.registry import ProbeRegistry
from app.infrastructure.ioc.api_ioc import ApiSlimProvider
from app.infrastructure.providers import LoggerProvider
from app.services.health_aggregator import HealthAggregator
from app.settings.config import HealthCheckSettings
from tests.mocks.mock_health_checks import MockHealthCheck


class MockHealthCheckProvider(Provider):
    """Реестр проверок берётся из контекста теста вместо реальных зависимостей"""

    registry = from_context(provides=ProbeRegistry, scope=Scope.APP)


@pytest.fixture()
def faker() -> Faker:
    """Фикстура для наполнения тестовых данных"""
    return Faker()


@pytest.fixture()
def logger() -> MessengerLogger:
    """Тестовый логгер"""
    return MessengerLogger(logger_type=LoggerType.TEST)


@pytest.fixture()
def health_settings() -> HealthCheckSettings:
    """Настройки проверок здоровья с коротким таймаутом"""
    return HealthCheckSettings(timeout_per_probe=0.5)


@pytest.fixture()
def probes() -> list[IHealthCheck]:
    """Все зависимости здоровы"""
    return [MockHealthCheck("db"), MockHealthCheck("redis"), MockHealthCheck("storage")]


@pytest.fixture()
def registry(probes: list[IHealthCheck]) -> ProbeRegistry:
    """Реестр проверок"""
    return ProbeRegistry(probes)


@pytest.fixture()
def aggregator(
    registry: ProbeRegistry, health_settings: HealthCheckSettings, logger: MessengerLogger
) -> HealthAggregator:
    """Агрегатор проверок"""
    return HealthAggregator(registry, health_settings, logger)


@pytest.fixture()
async def container(
    registry: ProbeRegistry, health_settings: HealthCheckSettings
) -> AsyncGenerator[AsyncContainer]:
    """Фикстура контейнера зависимостей"""
    container = make_async_container(
        ApiSlimProvider(),
        FastapiProvider(),
        LoggerProvider(),
        MockHealthCheckProvider(),
        context={
            HealthCheckSettings: health_settings,
            LoggerType: LoggerType.TEST,
            ProbeRegistry: registry,
        },
    )
    yield container
    await container.close()


@pytest.fixture()
def app(container: AsyncContainer) -> FastAPI:
    """Фикстура для создания тестового приложения FastAPI."""
    application = FastAPI(title="Messenger Health")
    setup_dishka(container, application)
    application.include_router(base_router)
    application.state.limiter = limiter
    application.add_middleware(SlowAPIASGIMiddleware)
    for exception, handler in exception_config.items():
        application.add_exception_handler(exception, handler)
    return application


@pytest.fixture()
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Фикстура для тестового клиента FastAPI."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client
