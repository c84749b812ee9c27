from __future__ import annotations

import pytest

from deckdraw.cards import Card, Rank, STANDARD_RANKS, STANDARD_SUITS, format_cards, rank_abbreviation


def test_identical_faces_are_distinct_cards() -> None:
    first = Card(rank="King", suit="Hearts")
    second = Card(rank="King", suit="Hearts")

    assert first != second
    assert first.face == second.face
    assert len({first, second}) == 2


def test_card_is_immutable() -> None:
    card = Card(rank="Ace", suit="Spades")
    with pytest.raises(AttributeError):
        card.rank = "King"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("rank", "suit", "description", "short"),
    [
        ("King", "Hearts", "King of Hearts", "K♥"),
        ("Ace", "Spades", "Ace of Spades", "A♠"),
        ("10", "Diamonds", "10 of Diamonds", "10♦"),
        ("7", "Clubs", "7 of Clubs", "7♣"),
        ("Queen", "Stars", "Queen of Stars", "Q?"),
    ],
)
def test_text_forms(rank: str, suit: str, description: str, short: str) -> None:
    card = Card(rank=rank, suit=suit)

    assert card.description == description
    assert card.short_description == short
    assert card.text(symbols=True) == short
    assert str(card) == description


def test_joker_text_forms() -> None:
    joker = Card.joker()

    assert joker.is_joker
    assert joker.rank == ""
    assert joker.suit == ""
    assert joker.description == "Joker"
    assert joker.short_description == "JKR"
    assert joker.suit_symbol == ""


def test_format_cards_separators() -> None:
    cards = [Card(rank="King", suit="Hearts"), Card(rank="2", suit="Clubs")]

    assert format_cards(cards) == "King of Hearts, 2 of Clubs"
    assert format_cards(cards, symbols=True) == "K♥ 2♣"
    assert format_cards([]) == ""


def test_standard_domains() -> None:
    assert len(STANDARD_RANKS) == 13
    assert STANDARD_SUITS == ("Hearts", "Diamonds", "Clubs", "Spades")
    assert [rank for rank in Rank if rank.is_face] == [Rank.JACK, Rank.QUEEN, Rank.KING]
    assert rank_abbreviation("Jack") == "J"
