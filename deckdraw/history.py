"""Bounded, newest-first event log."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .events import Event

__all__ = ["HISTORY_LIMIT", "HistoryLog"]

HISTORY_LIMIT = 50


class HistoryLog:
    """Keeps the most recent ``capacity`` events, newest first.

    Recording past capacity evicts the oldest entry.
    """

    def __init__(self, capacity: int = HISTORY_LIMIT) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._events: deque[Event] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def latest(self) -> Event | None:
        return self._events[0] if self._events else None

    def record(self, event: Event) -> None:
        self._events.appendleft(event)

    def clear(self) -> None:
        self._events.clear()

    def snapshot(self) -> tuple[Event, ...]:
        return tuple(self._events)

    def export_text(self, symbols: bool = False) -> str:
        """One line per event, newest first."""

        return "\n".join(event.text(symbols) for event in self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.snapshot())

    def __bool__(self) -> bool:
        return bool(self._events)
