"""Card value type and the text forms used for display and export."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

__all__ = [
    "Card",
    "Rank",
    "STANDARD_RANKS",
    "STANDARD_SUITS",
    "Suit",
    "format_cards",
    "rank_abbreviation",
    "suit_symbol",
]


class Suit(str, Enum):
    """The four suits of a standard deck."""

    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    SPADES = "Spades"


class Rank(str, Enum):
    """Ranks of a standard deck in ascending order."""

    ACE = "Ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)


STANDARD_RANKS: tuple[str, ...] = tuple(rank.value for rank in Rank)
STANDARD_SUITS: tuple[str, ...] = tuple(suit.value for suit in Suit)

_SUIT_SYMBOLS = {
    Suit.HEARTS.value: "♥",
    Suit.DIAMONDS.value: "♦",
    Suit.CLUBS.value: "♣",
    Suit.SPADES.value: "♠",
}

JOKER_DESCRIPTION = "Joker"
JOKER_SHORT = "JKR"


def suit_symbol(suit: str) -> str:
    """Return the unicode symbol for ``suit`` or ``"?"`` when unknown."""

    return _SUIT_SYMBOLS.get(suit, "?")


def rank_abbreviation(rank: str) -> str:
    """Numeric ranks keep every digit, named ranks use their initial."""

    if rank.isdigit():
        return rank
    return rank[:1]


@dataclass(frozen=True, slots=True)
class Card:
    """A single physical card.

    Identity is the ``id``: two cards with the same rank and suit (for
    instance from two combined decks) are still different cards.
    """

    rank: str = field(compare=False)
    suit: str = field(compare=False)
    is_joker: bool = field(default=False, compare=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def joker(cls, id: uuid.UUID | None = None) -> "Card":
        if id is None:
            return cls(rank="", suit="", is_joker=True)
        return cls(rank="", suit="", is_joker=True, id=id)

    @property
    def face(self) -> tuple[str, str, bool]:
        """The ``(rank, suit, is_joker)`` triple, ignoring identity."""

        return (self.rank, self.suit, self.is_joker)

    @property
    def suit_symbol(self) -> str:
        if self.is_joker:
            return ""
        return suit_symbol(self.suit)

    @property
    def description(self) -> str:
        """Verbose form, e.g. ``"King of Hearts"``."""

        if self.is_joker:
            return JOKER_DESCRIPTION
        return f"{self.rank} of {self.suit}"

    @property
    def short_description(self) -> str:
        """Compact form, e.g. ``"K♥"``."""

        if self.is_joker:
            return JOKER_SHORT
        return f"{rank_abbreviation(self.rank)}{self.suit_symbol}"

    def text(self, symbols: bool = False) -> str:
        return self.short_description if symbols else self.description

    def __str__(self) -> str:
        return self.description


def format_cards(cards: Iterable[Card], symbols: bool = False) -> str:
    """Join card text forms: ``", "`` for descriptions, ``" "`` for symbols."""

    separator = " " if symbols else ", "
    return separator.join(card.text(symbols) for card in cards)
