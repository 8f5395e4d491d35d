"""Core engine for the two-player card duel."""

from poker.cards import (
    ALL_SUITS,
    FULL_RANKS,
    SHORT_RANKS,
    Card,
    Deck,
    Rank,
    Suit,
    create_deck,
    draw_many,
    draw_one,
)
from poker.comparison import Winner, compare_evaluations, compare_hands
from poker.exceptions import (
    ConfigError,
    InsufficientCardsError,
    InvalidBetError,
    InvalidHandError,
    PokerError,
    RoundStateError,
)
from poker.game import RoundConfig, RoundController, RoundResult, RoundState, play_round
from poker.hand_evaluator import (
    HandCategory,
    HandEvaluation,
    HandEvaluator,
    evaluate_hand,
    reachable_categories,
)

__all__ = [
    "ALL_SUITS",
    "FULL_RANKS",
    "SHORT_RANKS",
    "Card",
    "ConfigError",
    "Deck",
    "HandCategory",
    "HandEvaluation",
    "HandEvaluator",
    "InsufficientCardsError",
    "InvalidBetError",
    "InvalidHandError",
    "PokerError",
    "Rank",
    "RoundConfig",
    "RoundController",
    "RoundResult",
    "RoundState",
    "RoundStateError",
    "Suit",
    "Winner",
    "compare_evaluations",
    "compare_hands",
    "create_deck",
    "draw_many",
    "draw_one",
    "evaluate_hand",
    "play_round",
    "reachable_categories",
]
