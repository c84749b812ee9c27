"""Immutable records of draws and shuffles."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Sequence, Union

from .cards import Card, format_cards

__all__ = ["DeckEvent", "DrawEvent", "Event", "EventKind", "ShuffleEvent"]

TIME_FORMAT = "%H:%M"


class EventKind(str, Enum):
    DRAW = "draw"
    SHUFFLE = "shuffle"


@dataclass(frozen=True, slots=True, kw_only=True)
class DeckEvent(ABC):
    """Fields shared by every event: a snapshot taken right after the action."""

    kind: ClassVar[EventKind]

    deck_count: int
    remaining_cards: int
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def cards(self) -> tuple[Card, ...]:
        return ()

    @property
    def formatted_time(self) -> str:
        return self.timestamp.strftime(TIME_FORMAT)

    @property
    @abstractmethod
    def description(self) -> str: ...

    @property
    @abstractmethod
    def short_description(self) -> str: ...

    def text(self, symbols: bool = False) -> str:
        return self.short_description if symbols else self.description


@dataclass(frozen=True, slots=True, kw_only=True)
class DrawEvent(DeckEvent):
    """One successful draw of one or more cards, in draw order."""

    kind: ClassVar[EventKind] = EventKind.DRAW

    drawn: tuple[Card, ...]

    @classmethod
    def from_cards(cls, cards: Sequence[Card], *, deck_count: int, remaining_cards: int) -> "DrawEvent":
        return cls(drawn=tuple(cards), deck_count=deck_count, remaining_cards=remaining_cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        return self.drawn

    @property
    def description(self) -> str:
        return format_cards(self.drawn)

    @property
    def short_description(self) -> str:
        return format_cards(self.drawn, symbols=True)


@dataclass(frozen=True, slots=True, kw_only=True)
class ShuffleEvent(DeckEvent):
    """The deck was rebuilt and shuffled back to full capacity."""

    kind: ClassVar[EventKind] = EventKind.SHUFFLE

    @property
    def description(self) -> str:
        plural = "s" if self.deck_count > 1 else ""
        return f"Deck shuffled ({self.deck_count} deck{plural})"

    @property
    def short_description(self) -> str:
        return "Shuffled"


Event = Union[DrawEvent, ShuffleEvent]
