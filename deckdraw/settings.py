"""User-facing settings passed explicitly into the session."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .errors import InvalidSettingsError
from .template import DeckTemplate

__all__ = ["DeckSettings", "MAX_DECKS", "MAX_DRAW_COUNT"]

MAX_DECKS = 8
MAX_DRAW_COUNT = 7


@dataclass(frozen=True, slots=True)
class DeckSettings:
    """Everything the host can toggle.

    ``deck_count`` and ``include_jokers`` define the deck composition; the
    rest only affect history recording and presentation.
    """

    deck_count: int = 1
    include_jokers: bool = False
    history_enabled: bool = True
    clear_history_on_shuffle: bool = False
    copy_with_symbol: bool = False
    unique_colors: bool = True
    draw_count: int = 1

    def __post_init__(self) -> None:
        if self.deck_count < 1:
            raise InvalidSettingsError(f"deck_count must be at least 1, got {self.deck_count}")
        if self.draw_count < 1:
            raise InvalidSettingsError(f"draw_count must be at least 1, got {self.draw_count}")

    def template(self) -> DeckTemplate:
        return DeckTemplate.standard(include_jokers=self.include_jokers)

    def composition_changed(self, other: "DeckSettings") -> bool:
        return self.deck_count != other.deck_count or self.include_jokers != other.include_jokers

    def replace(self, **changes: Any) -> "DeckSettings":
        return replace(self, **changes)
