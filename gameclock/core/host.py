"""
Функции «хоста»: монотонный таймер в миллисекундах, системное время
и форматирование даты. Часы получают их через конструктор, так что в
тестах их легко подменить.
"""

import time

_T0 = time.perf_counter()


def get_timer() -> float:
    """Миллисекунды с момента загрузки модуля (монотонно)."""
    return (time.perf_counter() - _T0) * 1000.0


def wall_time() -> float:
    """Текущее системное время в секундах (Unix timestamp)."""
    return time.time()


def format_date(fmt: str, timestamp: float) -> str:
    """
    Отформатировать timestamp через strftime.
    Ведущий «!» в формате – время по UTC, иначе локальное.
    """
    if fmt.startswith("!"):
        return time.strftime(fmt[1:], time.gmtime(timestamp))
    return time.strftime(fmt, time.localtime(timestamp))
