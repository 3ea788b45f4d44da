import typing as tp
from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field


class HealthCheckMode(str, Enum):
    """Режим проверки здоровья"""

    LIVENESS = "liveness"
    READINESS = "readiness"
    DETAILED = "detailed"


class ProbeResult(BaseModel):
    """Результат проверки одной зависимости"""

    model_config = ConfigDict(frozen=True)

    healthy: bool
    message: str | None = None
    info: dict[str, tp.Any] | None = None
    latency: timedelta


class CompositeStatus(BaseModel):
    """Сводный результат всех проверок за один вызов агрегатора"""

    model_config = ConfigDict(frozen=True)

    results: dict[str, ProbeResult]
    checked_at: datetime
    process_uptime: timedelta

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall_healthy(self) -> bool:
        """True, только если здоровы все зависимости"""
        return all(result.healthy for result in self.results.values())


class ObjectStorageHealth(BaseModel):
    """Результат проверки объектного хранилища"""

    healthy: bool
    message: str
