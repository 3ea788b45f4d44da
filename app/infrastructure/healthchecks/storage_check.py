import asyncio
import time
from datetime import timedelta

from app.common.logger import MessengerLogger
from app.common.storages.object_storage import ObjectStorage
from app.domain.schemas.healthcheck import ProbeResult
from app.infrastructure.healthchecks.interfaces import IHealthCheck


class StorageHealthCheck(IHealthCheck):
    def __init__(self, storage: ObjectStorage, logger: MessengerLogger):
        self.storage = storage
        self.logger = logger

    @property
    def name(self) -> str:
        return "storage"

    async def check(self, timeout: float) -> ProbeResult:
        start = time.perf_counter()
        try:
            async with asyncio.timeout(timeout):
                health = await self.storage.health_check()
            healthy, message = health.healthy, health.message
            if not healthy:
                self.logger.warning(f"Storage health check failed: {message}")
        except TimeoutError:
            healthy, message = False, "timeout"
        except Exception as e:
            self.logger.error(f"Storage health check failed: {e}")
            healthy, message = False, str(e) or "Storage health check failed"
        return ProbeResult(
            healthy=healthy,
            message=message,
            info=self.storage.get_storage_info(),
            latency=timedelta(seconds=time.perf_counter() - start),
        )
