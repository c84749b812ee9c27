"""Declarative deck recipes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping

from .cards import STANDARD_RANKS, STANDARD_SUITS, Rank
from .errors import InvalidTemplateError

__all__ = ["DeckTemplate", "PRESETS", "STANDARD_JOKERS", "preset", "preset_names"]

STANDARD_JOKERS = 2


@dataclass(frozen=True)
class DeckTemplate:
    """Recipe for one physical deck: rank multiplicities, suits and jokers."""

    rank_counts: Mapping[str, int] = field(default_factory=dict)
    included_suits: frozenset[str] = field(default_factory=frozenset)
    number_of_jokers: int = 0

    def __post_init__(self) -> None:
        counts = dict(self.rank_counts)
        for rank, count in counts.items():
            if count < 0:
                raise InvalidTemplateError(f"rank {rank!r} has negative count {count}")
        if self.number_of_jokers < 0:
            raise InvalidTemplateError(f"number_of_jokers must be non-negative, got {self.number_of_jokers}")
        object.__setattr__(self, "rank_counts", MappingProxyType(counts))
        object.__setattr__(self, "included_suits", frozenset(self.included_suits))

    def __hash__(self) -> int:
        return hash((frozenset(self.rank_counts.items()), self.included_suits, self.number_of_jokers))

    @classmethod
    def standard(cls, include_jokers: bool = False) -> "DeckTemplate":
        """The 52 card French deck, optionally with two jokers."""

        return cls(
            rank_counts={rank: 1 for rank in STANDARD_RANKS},
            included_suits=frozenset(STANDARD_SUITS),
            number_of_jokers=STANDARD_JOKERS if include_jokers else 0,
        )

    @classmethod
    def no_face_cards(cls) -> "DeckTemplate":
        return cls.standard().without_ranks(*(rank.value for rank in Rank if rank.is_face))

    @classmethod
    def empty(cls) -> "DeckTemplate":
        return cls()

    def without_ranks(self, *ranks: str) -> "DeckTemplate":
        counts = {rank: count for rank, count in self.rank_counts.items() if rank not in ranks}
        return replace(self, rank_counts=counts)

    def with_rank_count(self, rank: str, count: int) -> "DeckTemplate":
        counts = dict(self.rank_counts)
        counts[rank] = count
        return replace(self, rank_counts=counts)

    def with_suits(self, *suits: str) -> "DeckTemplate":
        return replace(self, included_suits=frozenset(suits))

    def with_jokers(self, count: int) -> "DeckTemplate":
        return replace(self, number_of_jokers=count)

    def total_cards_per_deck(self) -> int:
        return len(self.included_suits) * sum(self.rank_counts.values()) + self.number_of_jokers

    def ordered_suits(self) -> list[str]:
        """Included suits in canonical order, unknown suits sorted after."""

        known = [suit for suit in STANDARD_SUITS if suit in self.included_suits]
        extra = sorted(suit for suit in self.included_suits if suit not in STANDARD_SUITS)
        return known + extra

    def iter_faces(self) -> Iterator[tuple[str, str]]:
        """Yield ``(rank, suit)`` for every non-joker card of one deck."""

        for suit in self.ordered_suits():
            for rank, count in self.rank_counts.items():
                for _ in range(count):
                    yield rank, suit


PRESETS: dict[str, Callable[[], DeckTemplate]] = {
    "standard": DeckTemplate.standard,
    "standard-jokers": lambda: DeckTemplate.standard(include_jokers=True),
    "no-face-cards": DeckTemplate.no_face_cards,
    "empty": DeckTemplate.empty,
}


def preset(name: str) -> DeckTemplate:
    """Look up a named preset."""

    try:
        factory = PRESETS[name]
    except KeyError:
        raise InvalidTemplateError(f"unknown preset {name!r}; choose from {', '.join(PRESETS)}") from None
    return factory()


def preset_names() -> Iterable[str]:
    return tuple(PRESETS)
