import typing as tp
from datetime import datetime

from pydantic import BaseModel

READY = "ready"
NOT_READY = "not ready"
HEALTHY = "healthy"
UNHEALTHY = "unhealthy"


class LivenessResponse(BaseModel):
    """Ответ проверки жизнеспособности"""

    status: tp.Literal["ok"] = "ok"
    timestamp: datetime
    uptime: float


class ReadinessResponse(BaseModel):
    """Ответ проверки готовности"""

    status: tp.Literal["ready", "not ready"]
    checks: dict[str, bool]
    timestamp: datetime


class DependencyCheck(BaseModel):
    """Детальный результат проверки зависимости"""

    healthy: bool
    message: str | None = None
    info: dict[str, tp.Any] | None = None


class DetailedHealthResponse(BaseModel):
    """Ответ детальной проверки здоровья"""

    status: tp.Literal["healthy", "unhealthy"]
    checks: dict[str, DependencyCheck]
    timestamp: datetime
    uptime: float
