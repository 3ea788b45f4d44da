import abc

from app.api.v1.dto.responses.health import (
    DetailedHealthResponse,
    LivenessResponse,
    ReadinessResponse,
)
from app.domain.schemas.healthcheck import CompositeStatus, HealthCheckMode


class IHealthAggregator(abc.ABC):
    """Агрегатор проверок зависимостей"""

    @abc.abstractmethod
    async def run(
        self, mode: HealthCheckMode, timeout: float | None = None
    ) -> CompositeStatus:
        """Запуск всех проверок и сборка сводного статуса"""


class IHealthService(abc.ABC):
    """Сервис проверки здоровья"""

    @abc.abstractmethod
    async def liveness(self) -> tuple[LivenessResponse, int]:
        """Проверка жизнеспособности процесса"""

    @abc.abstractmethod
    async def readiness(self) -> tuple[ReadinessResponse, int]:
        """Проверка готовности принимать трафик"""

    @abc.abstractmethod
    async def detailed(self) -> tuple[DetailedHealthResponse, int]:
        """Детальная проверка всех зависимостей"""
