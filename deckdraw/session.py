"""Session object driving one deck and its history.

This is the interface a host (command line, interactive app) talks to. All
mutation happens synchronously inside these calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .deck import Deck, RandomSource
from .errors import InsufficientCardsError
from .events import DrawEvent, Event, ShuffleEvent
from .history import HISTORY_LIMIT, HistoryLog
from .settings import DeckSettings
from .template import STANDARD_JOKERS, DeckTemplate

__all__ = ["DeckSession", "DeckStatus"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeckStatus:
    remaining_cards: int
    total_possible_cards: int


class DeckSession:
    """Owns the deck, the history log and the current settings."""

    def __init__(
        self,
        settings: DeckSettings | None = None,
        template: DeckTemplate | None = None,
        rng: RandomSource | None = None,
        history_capacity: int = HISTORY_LIMIT,
    ) -> None:
        self._settings = settings if settings is not None else DeckSettings()
        self._rng = rng
        self._history = HistoryLog(history_capacity)
        self._current_draw: DrawEvent | None = None
        initial = template if template is not None else self._settings.template()
        self._deck = Deck(initial, self._settings.deck_count, rng)

    @property
    def settings(self) -> DeckSettings:
        return self._settings

    @property
    def template(self) -> DeckTemplate:
        return self._deck.template

    @property
    def deck_count(self) -> int:
        return self._deck.deck_count

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def remaining_cards(self) -> int:
        return self._deck.remaining_cards

    @property
    def total_possible_cards(self) -> int:
        return self._deck.total_possible_cards

    @property
    def current_draw(self) -> DrawEvent | None:
        """The last successful draw since the most recent shuffle."""

        return self._current_draw

    def status(self) -> DeckStatus:
        return DeckStatus(self._deck.remaining_cards, self._deck.total_possible_cards)

    def can_draw(self, count: int | None = None) -> bool:
        return self._deck.can_draw(self._settings.draw_count if count is None else count)

    def history(self) -> tuple[Event, ...]:
        return self._history.snapshot()

    def clear_history(self) -> None:
        self._history.clear()

    def export_history(self, symbols: bool | None = None) -> str:
        if symbols is None:
            symbols = self._settings.copy_with_symbol
        return self._history.export_text(symbols)

    def configure(self, template: DeckTemplate, deck_count: int) -> DeckStatus:
        """Replace the deck with a fresh, shuffled one.

        Always followed by the regular shuffle history policy, so a
        reconfiguration is logged (or clears the log) like any shuffle.
        """

        self._deck = Deck(template, deck_count, self._rng)
        if deck_count != self._settings.deck_count:
            self._settings = self._settings.replace(deck_count=deck_count)
        logger.info(
            "configured %d deck(s) of %d cards",
            deck_count,
            template.total_cards_per_deck(),
        )
        self._after_shuffle()
        return self.status()

    def apply_settings(self, settings: DeckSettings) -> DeckStatus | None:
        """Adopt ``settings``; a composition change reconfigures the deck."""

        previous = self._settings
        self._settings = settings
        if not previous.composition_changed(settings):
            return None
        template = self._deck.template
        if previous.include_jokers != settings.include_jokers:
            template = template.with_jokers(STANDARD_JOKERS if settings.include_jokers else 0)
        return self.configure(template, settings.deck_count)

    def draw(self, count: int | None = None) -> DrawEvent:
        """Draw ``count`` cards (default: the configured draw count).

        Raises :class:`InsufficientCardsError` without touching the deck or
        the history when fewer cards remain, and :class:`ValueError` for a
        count below one.
        """

        if count is None:
            count = self._settings.draw_count
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        try:
            cards = self._deck.draw_cards(count)
        except InsufficientCardsError as exc:
            logger.info("draw of %d refused: %d remaining", exc.requested, exc.remaining)
            raise
        event = DrawEvent.from_cards(
            cards,
            deck_count=self._deck.deck_count,
            remaining_cards=self._deck.remaining_cards,
        )
        self._current_draw = event
        if self._settings.history_enabled:
            self._history.record(event)
        logger.debug("drew %s", event.short_description)
        return event

    def shuffle(self) -> ShuffleEvent | None:
        """Reset the deck to full capacity.

        Returns the shuffle event, or ``None`` when clear-on-shuffle emptied
        the history instead.
        """

        self._deck.shuffle()
        return self._after_shuffle()

    def _after_shuffle(self) -> ShuffleEvent | None:
        self._current_draw = None
        event = ShuffleEvent(
            deck_count=self._deck.deck_count,
            remaining_cards=self._deck.remaining_cards,
        )
        if not self._settings.history_enabled:
            return event
        if self._settings.clear_history_on_shuffle:
            self._history.clear()
            logger.debug("history cleared on shuffle")
            return None
        self._history.record(event)
        return event
