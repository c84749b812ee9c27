"""The drawable card pool."""

from __future__ import annotations

import logging
import random
import uuid
from typing import MutableSequence, Protocol

from .cards import Card
from .errors import InsufficientCardsError, InvalidDeckCountError
from .template import DeckTemplate

__all__ = ["Deck", "RandomSource", "build_cards"]

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """The subset of :class:`random.Random` the deck relies on."""

    def shuffle(self, x: MutableSequence[Card]) -> None: ...

    def getrandbits(self, k: int) -> int: ...


def _card_id(rng: RandomSource) -> uuid.UUID:
    return uuid.UUID(int=rng.getrandbits(128), version=4)


def build_cards(template: DeckTemplate, deck_count: int, rng: RandomSource) -> list[Card]:
    """Materialise ``deck_count`` copies of ``template`` in canonical order."""

    cards: list[Card] = []
    for _ in range(deck_count):
        for rank, suit in template.iter_faces():
            cards.append(Card(rank=rank, suit=suit, id=_card_id(rng)))
        for _ in range(template.number_of_jokers):
            cards.append(Card.joker(id=_card_id(rng)))
    return cards


class Deck:
    """A pool of cards built from ``deck_count`` copies of a template.

    The end of the pool is the top of the deck. The template and deck count
    are fixed for the lifetime of the deck; changing either means building a
    new one.
    """

    def __init__(
        self,
        template: DeckTemplate | None = None,
        deck_count: int = 1,
        rng: RandomSource | None = None,
    ) -> None:
        if deck_count < 1:
            raise InvalidDeckCountError(f"deck_count must be at least 1, got {deck_count}")
        self._template = template if template is not None else DeckTemplate.standard()
        self._deck_count = deck_count
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._total = self._template.total_cards_per_deck() * deck_count
        self._cards: list[Card] = []
        self.shuffle()

    @property
    def template(self) -> DeckTemplate:
        return self._template

    @property
    def deck_count(self) -> int:
        return self._deck_count

    @property
    def remaining_cards(self) -> int:
        return len(self._cards)

    @property
    def total_possible_cards(self) -> int:
        return self._total

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the pool, top card last."""

        return tuple(self._cards)

    def shuffle(self) -> None:
        """Reset to a full, freshly permuted pool.

        Cards drawn earlier are not returned; a new complete set replaces the
        pool.
        """

        cards = build_cards(self._template, self._deck_count, self._rng)
        self._rng.shuffle(cards)
        self._cards = cards
        logger.debug("shuffled %d deck(s) into %d cards", self._deck_count, len(cards))

    def draw(self) -> Card | None:
        if not self._cards:
            return None
        return self._cards.pop()

    def can_draw(self, count: int) -> bool:
        return 0 <= count <= len(self._cards)

    def draw_cards(self, count: int) -> list[Card]:
        """Remove ``count`` cards from the top, all or nothing."""

        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        remaining = len(self._cards)
        if count > remaining:
            raise InsufficientCardsError(count, remaining)
        if count == 0:
            return []
        drawn = self._cards[-count:]
        drawn.reverse()
        del self._cards[-count:]
        return drawn

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(deck_count={self._deck_count}, remaining={len(self._cards)}/{self._total})"
