"""Exception hierarchy for the deckdraw core."""

from __future__ import annotations

__all__ = [
    "DeckError",
    "InsufficientCardsError",
    "InvalidDeckCountError",
    "InvalidSettingsError",
    "InvalidTemplateError",
]


class DeckError(Exception):
    """Base class for every error raised by the deck core."""


class InsufficientCardsError(DeckError):
    """Raised when a draw asks for more cards than the pool holds.

    The deck is left untouched when this is raised.
    """

    def __init__(self, requested: int, remaining: int) -> None:
        super().__init__(f"cannot draw {requested} card(s): only {remaining} remaining")
        self.requested = requested
        self.remaining = remaining


class InvalidTemplateError(DeckError, ValueError):
    """A deck template with negative counts."""


class InvalidDeckCountError(DeckError, ValueError):
    """A deck count below one."""


class InvalidSettingsError(DeckError, ValueError):
    """Settings that fail validation."""
