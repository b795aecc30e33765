"""
GameClock – игровые часы для Python‑движков: delta‑time, FPS,
счётчик кадров, секундомер и игровой календарь.
"""

from gameclock.utils import logger, Config, Profiler
from gameclock.core import (
    Clock, GameDuration, StopwatchNotStartedError, Runtime, Event, ENTER_FRAME
)
from gameclock.engine import Engine

__version__ = "1.0.0"

__all__ = [
    "Clock",
    "GameDuration",
    "StopwatchNotStartedError",
    "Runtime",
    "Event",
    "ENTER_FRAME",
    "Engine",
    "Config",
    "Profiler",
    "logger",
]
