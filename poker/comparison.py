"""Deciding the winner between two hands."""

from enum import Enum
from typing import Sequence

from poker.cards import FULL_RANKS, Card, Rank
from poker.exceptions import InvalidHandError
from poker.hand_evaluator import HandCategory, HandEvaluation, HandEvaluator


class Winner(Enum):
    """Outcome of comparing hand A against hand B."""

    SIDE_A = "A"
    SIDE_B = "B"
    TIE = "tie"

    def swapped(self) -> "Winner":
        """The outcome with the two sides exchanged."""
        if self is Winner.SIDE_A:
            return Winner.SIDE_B
        if self is Winner.SIDE_B:
            return Winner.SIDE_A
        return Winner.TIE

    def __str__(self) -> str:
        return {"A": "Side A", "B": "Side B", "tie": "Tie"}[self.value]


def compare_values(values_a: Sequence[int], values_b: Sequence[int]) -> Winner:
    """Position-by-position comparison of descending rank strengths."""
    if len(values_a) != len(values_b):
        raise InvalidHandError(
            f"Cannot tie-break hands of different sizes ({len(values_a)} vs {len(values_b)})"
        )
    for a, b in zip(values_a, values_b):
        if a != b:
            return Winner.SIDE_A if a > b else Winner.SIDE_B
    return Winner.TIE


def compare_hands(
    hand_a: Sequence[Card],
    category_a: HandCategory,
    hand_b: Sequence[Card],
    category_b: HandCategory,
    ranks: Sequence[Rank] = FULL_RANKS,
) -> Winner:
    """Compare two hands by category, then card by card.

    The higher category wins outright. Equal categories fall back to
    comparing both hands sorted high to low; the first differing position
    decides and identical rank sequences tie. The hands passed in are not
    reordered.
    """
    if category_a != category_b:
        return Winner.SIDE_A if category_a > category_b else Winner.SIDE_B

    evaluator = HandEvaluator(ranks, hand_size=None)
    return compare_values(evaluator.tiebreak_values(hand_a), evaluator.tiebreak_values(hand_b))


def compare_evaluations(a: HandEvaluation, b: HandEvaluation) -> Winner:
    """Compare two evaluated hands."""
    if a.category != b.category:
        return Winner.SIDE_A if a.category > b.category else Winner.SIDE_B
    return compare_values(a.values, b.values)
