"""
Диспетчер событий движка. Рассылает «enterFrame» один раз за кадр.

Подписка возвращает токен; отписка выполняется по этому токену.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from gameclock.core.host import get_timer
from gameclock.utils.logger import logger

ENTER_FRAME = "enterFrame"


@dataclass
class Event:
    """Событие, которое получают слушатели."""
    name: str
    time: float = 0.0
    frame: int = 0
    data: Dict[str, Any] = field(default_factory=dict)


class Runtime:
    """Диспетчер событий с подпиской по токенам."""
    def __init__(self, timer: Callable[[], float] = get_timer):
        self._timer = timer
        self._tokens = itertools.count(1)
        # token -> (имя события, слушатель)
        self._listeners: Dict[int, tuple] = {}
        self.frame = 0

    # -----------------------------------------------------------------
    def add_event_listener(self, name: str, listener: Callable[[Event], Any]) -> int:
        """Подписать `listener` на событие `name`, вернуть токен."""
        if not callable(listener):
            raise TypeError(f"Listener for '{name}' is not callable: {listener!r}")
        token = next(self._tokens)
        self._listeners[token] = (name, listener)
        logger.debug(f"[Runtime] Listener #{token} added for '{name}'")
        return token

    def remove_event_listener(self, token: int) -> bool:
        """Отписать слушателя. False, если токен неизвестен."""
        entry = self._listeners.pop(token, None)
        if entry is None:
            return False
        logger.debug(f"[Runtime] Listener #{token} removed from '{entry[0]}'")
        return True

    def has_event_listener(self, token: int) -> bool:
        return token in self._listeners

    def listener_count(self, name: str = None) -> int:
        if name is None:
            return len(self._listeners)
        return sum(1 for n, _ in self._listeners.values() if n == name)

    # -----------------------------------------------------------------
    def dispatch_event(self, name: str, **payload) -> Event:
        """
        Вызвать всех слушателей `name` в порядке подписки.
        Список снимается до рассылки: подписки/отписки внутри
        обработчиков действуют со следующего события.
        """
        event = Event(
            name=name,
            time=payload.pop("time", self._timer()),
            frame=payload.pop("frame", self.frame),
            data=payload,
        )
        snapshot = [l for n, l in self._listeners.values() if n == name]
        for listener in snapshot:
            listener(event)
        return event

    def enter_frame(self) -> Event:
        """Новый кадр: увеличить счётчик и разослать «enterFrame»."""
        self.frame += 1
        return self.dispatch_event(ENTER_FRAME)
