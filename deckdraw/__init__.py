"""Top-level package for the deckdraw card dispenser."""

from . import cards, deck, errors, events, history, session, settings, template
from .cards import Card
from .deck import Deck
from .errors import DeckError, InsufficientCardsError
from .events import DrawEvent, EventKind, ShuffleEvent
from .history import HISTORY_LIMIT, HistoryLog
from .session import DeckSession, DeckStatus
from .settings import DeckSettings
from .template import DeckTemplate

__all__ = [
    "Card",
    "Deck",
    "DeckError",
    "DeckSession",
    "DeckSettings",
    "DeckStatus",
    "DeckTemplate",
    "DrawEvent",
    "EventKind",
    "HISTORY_LIMIT",
    "HistoryLog",
    "InsufficientCardsError",
    "ShuffleEvent",
    "cards",
    "deck",
    "errors",
    "events",
    "history",
    "session",
    "settings",
    "template",
]
