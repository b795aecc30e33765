# -*- coding: utf-8 -*-
"""
conftest.py – ручные таймеры вместо системных.
Часы и Runtime получают их через конструктор, так что тесты полностью
детерминированы и не открывают GLFW‑окно.
"""

import pytest

from gameclock.core.clock import Clock
from gameclock.core.runtime import Runtime
from gameclock.utils.config import Config


# ----------------------------------------------------------------------
# Ручной таймер: время двигается только через advance()
# ----------------------------------------------------------------------
class ManualTimer:
    """Имитация монотонного таймера / системных часов."""
    def __init__(self, start: float = 0.0):
        self.now = start

    def advance(self, amount: float) -> None:
        self.now += amount

    def __call__(self) -> float:
        return self.now


# ----------------------------------------------------------------------
# PyTest‑fixtures
# ----------------------------------------------------------------------
@pytest.fixture
def timer() -> ManualTimer:
    """Монотонный таймер в мс."""
    return ManualTimer(1000.0)


@pytest.fixture
def wall() -> ManualTimer:
    """Системные часы в секундах."""
    return ManualTimer(1_700_000_000.0)


@pytest.fixture
def runtime(timer) -> Runtime:
    return Runtime(timer=timer)


@pytest.fixture
def make_clock(runtime, timer, wall):
    """Фабрика часов на ручных таймерах."""
    created = []

    def _make(**kwargs):
        kwargs.setdefault("target_fps", 60)
        clock = Clock(runtime, timer=timer, wall_clock=wall, **kwargs)
        created.append(clock)
        return clock

    yield _make
    for clock in created:
        clock.destroy()


@pytest.fixture
def config(tmp_path):
    """Чистый Config в tmp‑каталоге."""
    Config.reset()
    cfg = Config(tmp_path / "config.json")
    yield cfg
    Config.reset()
