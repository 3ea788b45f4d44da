import asyncio
import time
from datetime import timedelta

from app.common.logger import MessengerLogger
from app.common.storages.redis import RedisStorage
from app.domain.schemas.healthcheck import ProbeResult
from app.infrastructure.healthchecks.interfaces import IHealthCheck


class RedisHealthCheck(IHealthCheck):
    def __init__(self, redis_storage: RedisStorage, logger: MessengerLogger):
        self.redis_storage = redis_storage
        self.logger = logger

    @property
    def name(self) -> str:
        return "redis"

    async def check(self, timeout: float) -> ProbeResult:
        start = time.perf_counter()
        try:
            async with asyncio.timeout(timeout):
                healthy = await self.redis_storage.check_health()
            message = "Redis connection successful" if healthy else "Redis ping failed"
        except TimeoutError:
            healthy, message = False, "timeout"
        except Exception as e:
            self.logger.error(f"Redis health check failed: {e}")
            healthy, message = False, str(e) or "Redis check failed"
        return ProbeResult(
            healthy=healthy,
            message=message,
            latency=timedelta(seconds=time.perf_counter() - start),
        )
