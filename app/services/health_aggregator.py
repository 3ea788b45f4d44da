import asyncio
import time
from datetime import UTC, datetime, timedelta

from app.common.logger import MessengerLogger
from app.common.uptime import process_uptime
from app.domain.exceptions import EmptyProbeRegistryError
from app.domain.schemas.healthcheck import CompositeStatus, HealthCheckMode, ProbeResult
from app.infrastructure.healthchecks.interfaces import IHealthCheck
from app.infrastructure.healthchecks.registry import ProbeRegistry
from app.services.interfaces import IHealthAggregator
from app.settings.config import HealthCheckSettings

# Внешний таймаут на каждую проверку: timeout + DEADLINE_GRACE, собственный истекает раньше
DEADLINE_GRACE = 0.1


class HealthAggregator(IHealthAggregator):
    """Параллельный запуск проверок зависимостей с таймаутом на каждую"""

    def __init__(
        self,
        registry: ProbeRegistry,
        health_settings: HealthCheckSettings,
        logger: MessengerLogger,
    ):
        self.registry = registry
        self.health_settings = health_settings
        self.logger = logger

    async def run(
        self, mode: HealthCheckMode, timeout: float | None = None
    ) -> CompositeStatus:
        """Запуск всех проверок и сборка сводного статуса.

        Ждёт завершения или таймаута каждой проверки, даже если одна из
        зависимостей уже недоступна.
        """
        if mode == HealthCheckMode.LIVENESS:
            return CompositeStatus(
                results={}, checked_at=datetime.now(UTC), process_uptime=process_uptime()
            )

        probes = self.registry.all()
        if not probes:
            raise EmptyProbeRegistryError("Не зарегистрировано ни одной проверки здоровья")

        timeout = timeout if timeout is not None else self.health_settings.timeout_per_probe
        results = await asyncio.gather(
            *(self._run_probe(name, probe, timeout) for name, probe in probes)
        )

        status = CompositeStatus(
            results={name: result for (name, _), result in zip(probes, results, strict=True)},
            checked_at=datetime.now(UTC),
            process_uptime=process_uptime(),
        )

        for name, result in status.results.items():
            if not result.healthy:
                self.logger.warning(f"Dependency {name} is unhealthy: {result.message}")
        self.logger.debug(
            f"Health aggregation ({mode.value}) finished: "
            f"healthy={status.overall_healthy}, "
            + ", ".join(
                f"{name}={result.latency.total_seconds() * 1000:.1f}ms"
                for name, result in status.results.items()
            )
        )
        return status

    async def _run_probe(
        self, name: str, probe: IHealthCheck, timeout: float
    ) -> ProbeResult:
        start = time.perf_counter()
        try:
            return await asyncio.wait_for(
                probe.check(timeout), timeout=timeout + DEADLINE_GRACE
            )
        except TimeoutError:
            return ProbeResult(
                healthy=False, message="timeout", latency=timedelta(seconds=timeout)
            )
        except Exception as e:
            self.logger.exception(f"Health check {name} raised instead of reporting: {e}")
            return ProbeResult(
                healthy=False,
                message=str(e) or type(e).__name__,
                latency=timedelta(seconds=time.perf_counter() - start),
            )
