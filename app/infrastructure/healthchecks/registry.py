from collections.abc import Iterable

from app.infrastructure.healthchecks.interfaces import IHealthCheck


class ProbeRegistry:
    """Реестр проверок зависимостей.

    Заполняется один раз при старте процесса и дальше не меняется.
    Порядок регистрации влияет только на порядок вывода.
    """

    def __init__(self, probes: Iterable[IHealthCheck]):
        entries: list[tuple[str, IHealthCheck]] = []
        seen: set[str] = set()
        for probe in probes:
            if probe.name in seen:
                raise ValueError(f"Проверка {probe.name!r} уже зарегистрирована")
            seen.add(probe.name)
            entries.append((probe.name, probe))
        self._entries = tuple(entries)

    def all(self) -> tuple[tuple[str, IHealthCheck], ...]:
        """Все проверки в порядке регистрации"""
        return self._entries

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)
