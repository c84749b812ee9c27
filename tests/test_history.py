from __future__ import annotations

import pytest

from deckdraw.cards import Card
from deckdraw.events import DrawEvent, ShuffleEvent
from deckdraw.history import HISTORY_LIMIT, HistoryLog


def _draw(remaining: int) -> DrawEvent:
    return DrawEvent.from_cards([Card(rank="2", suit="Clubs")], deck_count=1, remaining_cards=remaining)


def test_records_newest_first() -> None:
    log = HistoryLog()
    first = _draw(51)
    second = _draw(50)

    log.record(first)
    log.record(second)

    assert log.snapshot() == (second, first)
    assert log.latest is second


def test_capacity_evicts_oldest() -> None:
    log = HistoryLog()
    events = [_draw(remaining) for remaining in range(60)]
    for event in events:
        log.record(event)

    snapshot = log.snapshot()
    assert HISTORY_LIMIT == 50
    assert len(log) == 50
    assert snapshot[0] is events[-1]
    assert snapshot[-1] is events[10]


def test_clear_and_bool() -> None:
    log = HistoryLog(capacity=3)
    assert not log
    log.record(_draw(1))
    assert log
    log.clear()
    assert len(log) == 0
    assert log.latest is None


def test_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        HistoryLog(capacity=0)


def test_export_text() -> None:
    log = HistoryLog()
    log.record(ShuffleEvent(deck_count=2, remaining_cards=104))
    log.record(
        DrawEvent.from_cards(
            [Card(rank="King", suit="Hearts"), Card(rank="3", suit="Spades")],
            deck_count=2,
            remaining_cards=102,
        )
    )

    assert log.export_text() == "King of Hearts, 3 of Spades\nDeck shuffled (2 decks)"
    assert log.export_text(symbols=True) == "K♥ 3♠\nShuffled"
    assert HistoryLog().export_text() == ""


def test_capacity_reports_configured_limit() -> None:
    assert HistoryLog().capacity == HISTORY_LIMIT
    assert HistoryLog(capacity=3).capacity == 3
