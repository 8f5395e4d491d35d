"""Hand evaluation for the duel game.

A hand is classified purely from how often each rank occurs in it; suits
play no part and there are no straights or flushes.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Sequence

from poker.cards import ALL_SUITS, FULL_RANKS, Card, Rank
from poker.exceptions import ConfigError, InvalidHandError

logger = logging.getLogger(__name__)


class HandCategory(IntEnum):
    """Hand categories from lowest to highest."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def classify_counts(counts: Sequence[int]) -> HandCategory:
    """Classify a multiset of rank occurrence counts.

    For four and five card hands this is the usual poker order; the ">="
    comparisons keep larger hands (or decks with more than four suits)
    well defined.
    """
    ordered = sorted(counts, reverse=True)
    if not ordered:
        raise InvalidHandError("Cannot classify an empty hand")

    if ordered[0] >= 4:
        return HandCategory.FOUR_OF_A_KIND
    if ordered[0] >= 3 and len(ordered) > 1 and ordered[1] >= 2:
        return HandCategory.FULL_HOUSE
    if ordered[0] >= 3:
        return HandCategory.THREE_OF_A_KIND

    pairs = ordered.count(2)
    if pairs >= 2:
        return HandCategory.TWO_PAIR
    if pairs == 1:
        return HandCategory.PAIR
    return HandCategory.HIGH_CARD


def _count_patterns(total: int, max_part: int, max_parts: int) -> Iterator[tuple[int, ...]]:
    """Yield partitions of total with parts <= max_part and at most max_parts parts."""
    if total == 0:
        yield ()
        return
    if max_parts == 0:
        return
    for part in range(min(total, max_part), 0, -1):
        for rest in _count_patterns(total - part, part, max_parts - 1):
            yield (part, *rest)


def reachable_categories(
    hand_size: int,
    num_ranks: int = len(FULL_RANKS),
    num_suits: int = len(ALL_SUITS),
) -> list[HandCategory]:
    """Categories a hand of hand_size cards can actually land in.

    A rank occurs at most num_suits times in a hand and a hand spans at most
    num_ranks distinct ranks, so e.g. Full House never occurs with four
    cards and High Card never occurs once hand_size exceeds num_ranks.
    """
    if hand_size < 1:
        raise ConfigError(f"Hand size must be at least 1, got {hand_size}")
    if num_ranks < 1 or num_suits < 1:
        raise ConfigError("Rank and suit sets must not be empty")

    found = {
        classify_counts(pattern)
        for pattern in _count_patterns(hand_size, num_suits, num_ranks)
    }
    return sorted(found)


@dataclass(frozen=True, slots=True)
class HandEvaluation:
    """Result of evaluating a hand."""

    category: HandCategory
    counts: tuple[tuple[Rank, int], ...]  # (rank, occurrences), biggest groups first
    values: tuple[int, ...]  # Rank strengths of every card, high to low
    cards: tuple[Card, ...]  # Cards as received

    @property
    def primary_rank(self) -> Rank:
        """Rank of the largest group (the pair, the triple, ...)."""
        return self.counts[0][0]

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.category!s}: {cards_str}"


class HandEvaluator:
    """Evaluate hands for a configured rank set and hand size."""

    def __init__(self, ranks: Sequence[Rank] = FULL_RANKS, hand_size: int | None = 4) -> None:
        if not ranks:
            raise ConfigError("rank set must not be empty")
        if len(set(ranks)) != len(ranks):
            raise ConfigError(f"rank set contains duplicates: {list(ranks)}")
        if hand_size is not None and hand_size < 1:
            raise ConfigError(f"Hand size must be at least 1, got {hand_size}")
        self.ranks = tuple(ranks)
        self.hand_size = hand_size
        self._strength = {rank: i for i, rank in enumerate(self.ranks)}

    def strength(self, rank: Rank) -> int:
        """Position of rank in the configured rank order (0 = weakest)."""
        try:
            return self._strength[rank]
        except KeyError:
            raise InvalidHandError(f"Rank {rank!s} is not part of the configured rank set") from None

    def tiebreak_values(self, cards: Sequence[Card]) -> tuple[int, ...]:
        """Rank strengths of the cards sorted high to low."""
        return tuple(sorted((self.strength(c.rank) for c in cards), reverse=True))

    def evaluate(self, cards: Sequence[Card]) -> HandEvaluation:
        """Classify a hand. Card order does not matter."""
        cards = tuple(cards)
        if not cards:
            raise InvalidHandError("Cannot evaluate an empty hand")
        if self.hand_size is not None and len(cards) != self.hand_size:
            raise InvalidHandError(f"Expected {self.hand_size} cards, got {len(cards)}")
        if len(set(cards)) != len(cards):
            raise InvalidHandError(f"Hand contains the same card twice: {' '.join(map(str, cards))}")

        values = self.tiebreak_values(cards)
        rank_counts = Counter(c.rank for c in cards)
        counts = tuple(
            sorted(rank_counts.items(), key=lambda rc: (rc[1], self._strength[rc[0]]), reverse=True)
        )
        category = classify_counts([c for _, c in counts])

        evaluation = HandEvaluation(category=category, counts=counts, values=values, cards=cards)
        logger.debug("Evaluated %s", evaluation)
        return evaluation

    def reachable_categories(self, num_suits: int = len(ALL_SUITS)) -> list[HandCategory]:
        """Categories reachable with this evaluator's rank set and hand size."""
        if self.hand_size is None:
            raise ConfigError("Reachable categories need a fixed hand size")
        return reachable_categories(self.hand_size, len(self.ranks), num_suits)


def evaluate_hand(
    cards: Sequence[Card],
    ranks: Sequence[Rank] = FULL_RANKS,
    hand_size: int | None = None,
) -> HandEvaluation:
    """Evaluate a hand; any non-empty size is accepted unless hand_size is given."""
    return HandEvaluator(ranks, hand_size).evaluate(cards)
