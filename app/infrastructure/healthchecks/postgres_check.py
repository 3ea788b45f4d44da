import asyncio
import time
from datetime import timedelta

from app.common.database import Database
from app.common.logger import MessengerLogger
from app.domain.schemas.healthcheck import ProbeResult
from app.infrastructure.healthchecks.interfaces import IHealthCheck


class PostgresHealthCheck(IHealthCheck):
    def __init__(self, database: Database, logger: MessengerLogger):
        self.database = database
        self.logger = logger

    @property
    def name(self) -> str:
        return "db"

    async def check(self, timeout: float) -> ProbeResult:
        start = time.perf_counter()
        info = {"replica": self.database.has_replica}
        try:
            async with asyncio.timeout(timeout):
                healthy = await self.database.test_connection()
        except TimeoutError:
            message = "timeout"
            healthy = False
        except Exception as e:
            self.logger.error(f"Database health check failed: {e}")
            message = str(e) or "Database check failed"
            healthy = False
        else:
            message = (
                "Database connection successful"
                if healthy
                else "Database connection failed"
            )
        return ProbeResult(
            healthy=healthy,
            message=message,
            info=info,
            latency=timedelta(seconds=time.perf_counter() - start),
        )
