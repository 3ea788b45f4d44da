from collections.abc import AsyncIterable

import boto3
import redis.asyncio as redis
from dishka import Provider, Scope, from_context, provide

from app.common.database import Database
from app.common.logger import LoggerType, MessengerLogger
from app.common.storages.object_storage import ObjectStorage, client_config
from app.common.storages.redis import RedisStorage
from app.settings.config import (
    HealthCheckSettings,
    PostgresSettings,
    RedisSettings,
    StorageSettings,
)


class LoggerProvider(Provider):
    """Провайдер для логгера."""

    logger_type = from_context(provides=LoggerType, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_logger(self, logger_type: LoggerType) -> MessengerLogger:
        """Получение логгера."""
        return MessengerLogger(logger_type=logger_type)


class DatabaseProvider(Provider):
    """Провайдер для Postgres."""

    postgres_settings = from_context(provides=PostgresSettings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def database(self, postgres_settings: PostgresSettings) -> AsyncIterable[Database]:
        """Получение движков БД, пулы закрываются при остановке контейнера."""
        database = Database(postgres_settings)
        yield database
        await database.dispose()


class RedisProvider(Provider):
    """Провайдер для Redis."""

    redis_settings = from_context(provides=RedisSettings, scope=Scope.APP)
    redis_storage = provide(RedisStorage, scope=Scope.APP)

    @provide(scope=Scope.APP)
    async def redis_client(self, redis_settings: RedisSettings) -> AsyncIterable[redis.Redis]:
        """Получение клиента Redis."""
        client = redis.from_url(str(redis_settings.dsn))
        yield client
        await client.aclose()


class StorageProvider(Provider):
    """Провайдер для объектного хранилища S3/MinIO."""

    storage_settings = from_context(provides=StorageSettings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def object_storage(
        self,
        storage_settings: StorageSettings,
        health_settings: HealthCheckSettings,
        logger: MessengerLogger,
    ) -> ObjectStorage:
        """Получение клиента S3, таймауты запросов равны таймауту проверки."""
        client = boto3.client(
            "s3",
            endpoint_url=storage_settings.endpoint,
            aws_access_key_id=storage_settings.access_key,
            aws_secret_access_key=storage_settings.secret_key,
            region_name=storage_settings.region,
            config=client_config(health_settings.timeout_per_probe),
        )
        return ObjectStorage(client, storage_settings, logger)
