import logging
from enum import Enum


class LoggerType(Enum):
    """Тип логгера"""

    APP = "app"
    TEST = "test"

    @property
    def logger_name(self) -> str:
        """Возвращает имя логгера, соответствующее типу."""
        return self.value


class MessengerLogger(logging.Logger):
    """Логгер, который использует стандартную иерархию Python logging,
    но инициализируется с именем, соответствующим типу (app, test).
    """

    def __new__(
        cls, logger_type: LoggerType, name: str = __name__, level: int = logging.DEBUG
    ):
        """Возвращает уже существующий логгер из иерархии Python logging,
        имя которого определяется по logger_type.
        """
        return logging.getLogger(logger_type.logger_name)

    def __init__(
        self, logger_type: LoggerType, name: str = __name__, level: int = logging.DEBUG
    ):
        """Нужен только для аннотаций типов dishka. Обработчики и уровень
        задаются через logging.config.dictConfig.
        """
        super().__init__(name=name, level=level)
