from dishka import Provider, Scope, from_context, provide

from app.common.database import Database
from app.common.logger import MessengerLogger
from app.common.storages.object_storage import ObjectStorage
from app.common.storages.redis import RedisStorage
from app.infrastructure.healthchecks.postgres_check import PostgresHealthCheck
from app.infrastructure.healthchecks.redis_check import RedisHealthCheck
from app.infrastructure.healthchecks.registry import ProbeRegistry
from app.infrastructure.healthchecks.storage_check import StorageHealthCheck
from app.services.health import HealthService
from app.services.health_aggregator import HealthAggregator
from app.services.interfaces import IHealthAggregator, IHealthService
from app.settings.config import HealthCheckSettings


class ApiSlimProvider(Provider):
    """Легкий API - app провайдер"""

    health_config = from_context(provides=HealthCheckSettings, scope=Scope.APP)
    health_aggregator = provide(
        HealthAggregator, scope=Scope.APP, provides=IHealthAggregator
    )
    health_service = provide(HealthService, scope=Scope.REQUEST, provides=IHealthService)


class HealthCheckProvider(Provider):
    """Провайдер для health checks"""

    @provide(scope=Scope.APP)
    def provide_postgres_health_check(
        self, database: Database, logger: MessengerLogger
    ) -> PostgresHealthCheck:
        return PostgresHealthCheck(database, logger)

    @provide(scope=Scope.APP)
    def provide_redis_health_check(
        self, redis_storage: RedisStorage, logger: MessengerLogger
    ) -> RedisHealthCheck:
        return RedisHealthCheck(redis_storage, logger)

    @provide(scope=Scope.APP)
    def provide_storage_health_check(
        self, storage: ObjectStorage, logger: MessengerLogger
    ) -> StorageHealthCheck:
        return StorageHealthCheck(storage, logger)

    @provide(scope=Scope.APP)
    def provide_probe_registry(
        self,
        postgres_check: PostgresHealthCheck,
        redis_check: RedisHealthCheck,
        storage_check: StorageHealthCheck,
    ) -> ProbeRegistry:
        """Реестр проверок: db, redis, storage"""
        return ProbeRegistry([postgres_check, redis_check, storage_check])
