import time
from datetime import timedelta

PROCESS_STARTED_AT = time.monotonic()


def process_uptime() -> timedelta:
    """Время работы процесса с момента импорта модуля"""
    return timedelta(seconds=time.monotonic() - PROCESS_STARTED_AT)
