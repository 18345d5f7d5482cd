"""Thread-safe bounded ring buffer of game events for the render consumer."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

from keycrafter.core.enums import EventCategory


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single game event for the event feed."""

    tick: int
    category: EventCategory
    message: str
    node_ids: tuple[int, ...] = ()


class EventLog:
    """Keeps the most recent *capacity* events; older ones fall off."""

    __slots__ = ("_buffer", "_lock")

    def __init__(self, capacity: int = 200) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def append(self, event: GameEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_tick(self, tick: int) -> list[GameEvent]:
        """Return all retained events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def latest(self, count: int = 20) -> list[GameEvent]:
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
