from datetime import UTC, datetime

from fastapi import status

from app.api.v1.dto.responses.health import (
    HEALTHY,
    NOT_READY,
    READY,
    UNHEALTHY,
    DependencyCheck,
    DetailedHealthResponse,
    LivenessResponse,
    ReadinessResponse,
)
from app.common.uptime import process_uptime
from app.domain.schemas.healthcheck import HealthCheckMode
from app.services.interfaces import IHealthAggregator, IHealthService


def http_status(healthy: bool) -> int:
    return status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE


class HealthService(IHealthService):
    """Сервис проверки здоровья"""

    def __init__(self, aggregator: IHealthAggregator):
        self.aggregator = aggregator

    async def liveness(self) -> tuple[LivenessResponse, int]:
        """Проверка жизнеспособности процесса, зависимости не опрашиваются"""
        response = LivenessResponse(
            timestamp=datetime.now(UTC),
            uptime=process_uptime().total_seconds(),
        )
        return response, status.HTTP_200_OK

    async def readiness(self) -> tuple[ReadinessResponse, int]:
        """Проверка готовности принимать трафик"""
        composite = await self.aggregator.run(HealthCheckMode.READINESS)
        response = ReadinessResponse(
            status=READY if composite.overall_healthy else NOT_READY,
            checks={name: result.healthy for name, result in composite.results.items()},
            timestamp=composite.checked_at,
        )
        return response, http_status(composite.overall_healthy)

    async def detailed(self) -> tuple[DetailedHealthResponse, int]:
        """Детальная проверка всех зависимостей"""
        composite = await self.aggregator.run(HealthCheckMode.DETAILED)
        response = DetailedHealthResponse(
            status=HEALTHY if composite.overall_healthy else UNHEALTHY,
            checks={
                name: DependencyCheck(
                    healthy=result.healthy, message=result.message, info=result.info
                )
                for name, result in composite.results.items()
            },
            timestamp=composite.checked_at,
            uptime=composite.process_uptime.total_seconds(),
        )
        return response, http_status(composite.overall_healthy)
