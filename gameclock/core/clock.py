"""
Игровые часы: delta‑time, FPS, счётчик кадров, секундомер и
«игровой календарь» (кадры → дата).

Часы подписываются на «enterFrame» у Runtime и обновляются раз в кадр.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional

from gameclock.core.host import format_date, get_timer, wall_time
from gameclock.core.runtime import ENTER_FRAME, Event, Runtime
from gameclock.utils.logger import logger


class StopwatchNotStartedError(RuntimeError):
    """stop() вызван без предварительного start()."""


@dataclass(frozen=True)
class GameDuration:
    """Разбиение количества кадров на дни/часы/минуты/секунды/мс."""
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0


class Clock:
    """Часы, обновляемые по событию «enterFrame»."""
    def __init__(
        self,
        runtime: Runtime,
        target_fps: float = 60,
        frames: int = 0,
        timer: Callable[[], float] = get_timer,
        wall_clock: Callable[[], float] = wall_time,
        date_formatter: Callable[[str, float], str] = format_date,
    ):
        if target_fps <= 0:
            raise ValueError(f"target_fps must be positive, got {target_fps}")

        self._runtime = runtime
        self._timer = timer
        self._wall_clock = wall_clock
        self._date_formatter = date_formatter

        self.target_fps = target_fps
        self._dt = 0.0
        self._fps = None
        # Длительность одного кадра в мс – фиксирована на всё время жизни
        self._frame_duration = 1000.0 / target_fps
        self._frames = frames or 0
        self._previous_time = timer()
        self._start = wall_clock()
        self._stopwatch_start = None

        self._token = runtime.add_event_listener(ENTER_FRAME, self.enter_frame)
        logger.debug(f"[Clock] Created at {target_fps} fps, frames={self._frames}")

    # -----------------------------------------------------------------
    def enter_frame(self, event: Optional[Event] = None) -> None:
        """Обработчик «enterFrame»: счётчик кадров, delta‑time и FPS."""
        if self._frame_duration is None:
            return

        self._frames += 1

        now = self._timer()
        self._dt = (now - self._previous_time) / self._frame_duration
        self._previous_time = now

        elapsed = self._wall_clock() - self._start
        self._fps = self._frames / elapsed if elapsed != 0 else 0.0

    def delta(self):
        """Delta‑time в долях кадра (1.0 – ровно один кадр)."""
        return self._dt

    def get_fps(self) -> float:
        return self._fps or 0

    def set_frames(self, frames: int = None) -> None:
        self._frames = frames or 0

    def get_frames(self):
        return self._frames

    # -----------------------------------------------------------------
    def frames_to_duration(self, frames: int = None) -> GameDuration:
        """
        Перевести количество кадров в GameDuration.

        Каждое поле считается от общего числа секунд. Минуты и секунды
        берутся по модулю частоты кадров, а не 60.
        """
        if frames is None:
            frames = self.get_frames() or 0

        fps = self.target_fps
        seconds = frames / fps

        return GameDuration(
            days=math.floor(seconds / 86400),
            hours=math.floor(math.fmod(seconds, 86400) / 3600),
            minutes=math.floor(math.fmod(seconds, 3600) / fps),
            seconds=math.floor(math.fmod(seconds, fps)),
            milliseconds=math.floor(math.fmod(seconds * fps, fps)),
        )

    def to_game_date(self, start: float = None, multiplier: float = None, fmt: str = None):
        """
        Игровая дата: `start` + прошедшие игровые секунды * `multiplier`.

        Без `fmt` возвращает timestamp, с `fmt` (даже пустым) – строку
        (см. format_date). Нулевой `multiplier` останавливает календарь.
        """
        if start is None:
            start = 0
        if multiplier is None:
            multiplier = 1
        calculated = start + (self.get_frames() / self.target_fps) * multiplier
        if fmt is not None:
            return self._date_formatter(fmt, calculated)
        return calculated

    # -----------------------------------------------------------------
    def start(self) -> None:
        """Запустить секундомер."""
        self._stopwatch_start = self._timer()

    def stop(self, message: str = None) -> float:
        """Остановить секундомер, залогировать и вернуть время в мс."""
        if self._stopwatch_start is None:
            raise StopwatchNotStartedError("Clock.stop() called before Clock.start()")

        elapsed = self._timer() - self._stopwatch_start
        logger.info(f"{message or 'Time'} = {elapsed:.2f} ms")
        return float(f"{elapsed:.2f}")

    # -----------------------------------------------------------------
    def destroy(self) -> None:
        """Отписаться от «enterFrame» и очистить состояние."""
        self._dt = None
        self._fps = None
        self._frames = None
        self._previous_time = None
        self._frame_duration = None

        if self._token is not None:
            self._runtime.remove_event_listener(self._token)
            self._token = None
            logger.debug("[Clock] Destroyed")

    @property
    def destroyed(self) -> bool:
        return self._token is None
