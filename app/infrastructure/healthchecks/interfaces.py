from abc import ABC, abstractmethod

from app.domain.schemas.healthcheck import ProbeResult


class IHealthCheck(ABC):
    @abstractmethod
    async def check(self, timeout: float) -> ProbeResult:
        """Выполнить проверку здоровья за время не больше timeout.

        Не выбрасывает исключений: любая ошибка зависимости возвращается
        как ProbeResult(healthy=False).
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Имя проверки"""
        pass
