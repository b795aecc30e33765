"""
Пакет core – часы, диспетчер кадров и функции хоста.
"""

from gameclock.core.clock import Clock, GameDuration, StopwatchNotStartedError
from gameclock.core.runtime import ENTER_FRAME, Event, Runtime

__all__ = ["Clock", "GameDuration", "StopwatchNotStartedError",
           "ENTER_FRAME", "Event", "Runtime"]
