from __future__ import annotations

import random
from collections import Counter
from typing import MutableSequence

import pytest

from deckdraw.cards import Card
from deckdraw.deck import Deck, build_cards
from deckdraw.errors import InsufficientCardsError, InvalidDeckCountError
from deckdraw.template import DeckTemplate


class NoShuffle(random.Random):
    """Keeps the canonical build order so draws are predictable."""

    def shuffle(self, x: MutableSequence[Card]) -> None:  # type: ignore[override]
        return None


@pytest.mark.parametrize(
    ("template", "deck_count", "expected"),
    [
        (DeckTemplate.standard(), 1, 52),
        (DeckTemplate.standard(include_jokers=True), 2, 108),
        (DeckTemplate.no_face_cards(), 3, 120),
        (DeckTemplate.empty(), 4, 0),
    ],
)
def test_full_after_construction_and_shuffle(template: DeckTemplate, deck_count: int, expected: int) -> None:
    deck = Deck(template, deck_count, random.Random(11))

    assert deck.total_possible_cards == expected
    assert deck.remaining_cards == expected

    deck.draw_cards(min(5, expected))
    deck.shuffle()

    assert deck.remaining_cards == expected


def test_deck_count_must_be_positive() -> None:
    with pytest.raises(InvalidDeckCountError):
        Deck(DeckTemplate.standard(), 0)


def test_draw_cards_removes_exactly_count() -> None:
    deck = Deck(DeckTemplate.standard(), 1, random.Random(3))

    drawn = deck.draw_cards(5)

    assert len(drawn) == 5
    assert len({card.id for card in drawn}) == 5
    assert deck.remaining_cards == 47
    assert not set(drawn) & set(deck.cards)


def test_draw_cards_comes_from_the_top_in_order() -> None:
    deck = Deck(DeckTemplate.standard(), 1, random.Random(5))
    top_three = list(reversed(deck.cards[-3:]))

    assert deck.draw_cards(3) == top_three


def test_over_draw_is_atomic() -> None:
    deck = Deck(DeckTemplate.standard(), 1, random.Random(9))
    deck.draw_cards(5)
    before = deck.cards

    with pytest.raises(InsufficientCardsError) as excinfo:
        deck.draw_cards(50)

    assert excinfo.value.requested == 50
    assert excinfo.value.remaining == 47
    assert deck.remaining_cards == 47
    assert deck.cards == before


def test_draw_zero_and_negative() -> None:
    deck = Deck(DeckTemplate.standard(), 1, random.Random(2))

    assert deck.draw_cards(0) == []
    assert deck.remaining_cards == 52
    with pytest.raises(ValueError):
        deck.draw_cards(-1)


def test_single_draw_returns_none_when_empty() -> None:
    deck = Deck(DeckTemplate(rank_counts={"Ace": 1}, included_suits=frozenset({"Hearts"})), 1, random.Random(1))

    card = deck.draw()

    assert card is not None
    assert card.description == "Ace of Hearts"
    assert deck.draw() is None
    assert deck.remaining_cards == 0


def test_can_draw_matches_remaining() -> None:
    deck = Deck(DeckTemplate.no_face_cards(), 1, random.Random(4))

    assert deck.can_draw(40)
    assert not deck.can_draw(41)


def test_shuffle_is_a_full_reset_with_new_identities() -> None:
    deck = Deck(DeckTemplate.standard(), 1, random.Random(8))
    drawn = deck.draw_cards(10)

    deck.shuffle()

    assert deck.remaining_cards == 52
    assert not set(drawn) & set(deck.cards)


def test_composition_is_reproducible() -> None:
    template = DeckTemplate.standard(include_jokers=True)
    first = Deck(template, 2, random.Random(1))
    second = Deck(template, 2, random.Random(2))

    assert Counter(card.face for card in first.cards) == Counter(card.face for card in second.cards)
    assert not {card.id for card in first.cards} & {card.id for card in second.cards}


def test_multi_deck_duplicates_have_distinct_ids() -> None:
    deck = Deck(DeckTemplate.standard(), 3, random.Random(6))
    faces = Counter(card.face for card in deck.cards)

    assert faces[("King", "Hearts", False)] == 3
    assert len({card.id for card in deck.cards}) == 156


def test_jokers_added_per_deck() -> None:
    deck = Deck(DeckTemplate.standard(include_jokers=True), 2, random.Random(6))

    assert sum(card.is_joker for card in deck.cards) == 4


def test_seeded_rng_reproduces_pool() -> None:
    first = Deck(DeckTemplate.standard(), 1, random.Random(42))
    second = Deck(DeckTemplate.standard(), 1, random.Random(42))

    assert [card.id for card in first.cards] == [card.id for card in second.cards]
    assert [card.face for card in first.cards] == [card.face for card in second.cards]


def test_injected_shuffle_is_used() -> None:
    deck = Deck(DeckTemplate.standard(), 1, NoShuffle(0))

    assert deck.draw().description == "King of Spades"
    assert deck.draw().description == "Queen of Spades"


def test_build_cards_canonical_order() -> None:
    cards = build_cards(DeckTemplate.standard(include_jokers=True), 1, random.Random(0))

    assert cards[0].description == "Ace of Hearts"
    assert cards[51].description == "King of Spades"
    assert cards[52].is_joker and cards[53].is_joker
