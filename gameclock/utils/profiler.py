"""
Контекст‑менеджер профайлинга – измеряет время выполнения блока кода.
"""

from gameclock.core.host import get_timer
from gameclock.utils.logger import logger

class Profiler:
    """Контекст‑менеджер для измерения времени выполнения (в мс)."""
    def __init__(self, name: str, timer=get_timer):
        self.name = name
        self._timer = timer
        self._start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self._start = self._timer()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = round(self._timer() - self._start, 2)
        logger.debug(f"[Profiler] {self.name}: {self.elapsed:.2f} ms")
