class DomainException(Exception):
    """Базовая ошибка предметной области"""


class HealthAggregationError(DomainException):
    """Нарушение инварианта агрегатора проверок здоровья"""


class EmptyProbeRegistryError(HealthAggregationError):
    """Не зарегистрировано ни одной проверки"""
