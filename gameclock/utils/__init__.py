# gameclock/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger   – готовый объект logging.Logger (с level INFO)
    * Config   – JSON‑конфигурация
    * Profiler – замер времени блока кода
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler

__all__ = ["logger", "Config", "DEFAULT_CONFIG", "Profiler"]
