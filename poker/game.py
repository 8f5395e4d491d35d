"""Round orchestration: deal two hands, evaluate them, pick a winner."""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto
from numbers import Real
from random import Random
from typing import Iterator

from poker.cards import ALL_SUITS, FULL_RANKS, Card, Deck, Rank, Suit, validate_card_sets
from poker.comparison import Winner, compare_evaluations
from poker.exceptions import ConfigError, InvalidBetError, RoundStateError
from poker.hand_evaluator import HandCategory, HandEvaluation, HandEvaluator

logger = logging.getLogger(__name__)


class RoundState(Enum):
    """Lifecycle of a round controller."""

    IDLE = auto()
    DEALING = auto()
    EVALUATING = auto()
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.title()


class Side(Enum):
    """Who a card is dealt to."""

    PLAYER = auto()  # Side A, the human
    OPPONENT = auto()  # Side B, the computer

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class RoundConfig:
    """Configuration for a round."""

    ranks: tuple[Rank, ...] = FULL_RANKS
    suits: tuple[Suit, ...] = ALL_SUITS
    hand_size: int = 4
    opponent_max_bet: int = 100

    def __post_init__(self) -> None:
        validate_card_sets(self.ranks, self.suits)
        for name in ("hand_size", "opponent_max_bet"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if self.hand_size < 1:
            raise ConfigError(f"Hand size must be at least 1, got {self.hand_size}")
        deck_size = len(self.ranks) * len(self.suits)
        if 2 * self.hand_size > deck_size:
            raise ConfigError(
                f"A {deck_size}-card deck cannot deal two hands of {self.hand_size}"
            )
        if self.opponent_max_bet < 1:
            raise ConfigError(f"Opponent max bet must be at least 1, got {self.opponent_max_bet}")


@dataclass(frozen=True)
class DealStep:
    """A single card leaving the deck, for progressive reveal."""

    index: int  # Position in the hand it joins
    side: Side
    card: Card


@dataclass(frozen=True)
class RoundResult:
    """Result of a completed round."""

    player_hand: tuple[Card, ...]
    opponent_hand: tuple[Card, ...]
    player_evaluation: HandEvaluation
    opponent_evaluation: HandEvaluation
    winner: Winner  # SIDE_A is the player, SIDE_B the opponent
    bet: float
    opponent_bet: int
    draws: tuple[DealStep, ...] = field(default=())

    @property
    def player_category(self) -> HandCategory:
        return self.player_evaluation.category

    @property
    def opponent_category(self) -> HandCategory:
        return self.opponent_evaluation.category

    @property
    def decided_by_tiebreak(self) -> bool:
        """True when both hands shared a category."""
        return self.player_category == self.opponent_category

    @property
    def winner_label(self) -> str:
        return {
            Winner.SIDE_A: "Player",
            Winner.SIDE_B: "Opponent",
            Winner.TIE: "Tie",
        }[self.winner]


def validate_bet(value: object) -> float | int:
    """Return the bet if it is a positive finite number.

    Numeric strings are accepted so a text input can be passed straight in.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise InvalidBetError(f"Bet must be a number, got {text!r}") from None

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidBetError(f"Bet must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidBetError(f"Bet must be a positive number, got {value}")
    return value


class RoundController:
    """Orchestrate one round at a time between the player and the opponent.

    Every round builds its own deck; nothing carries over between rounds.
    """

    def __init__(
        self,
        config: RoundConfig | None = None,
        rng: Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config or RoundConfig()
        self.rng = rng if rng is not None else Random(seed)
        self.evaluator = HandEvaluator(self.config.ranks, self.config.hand_size)

        self.state = RoundState.IDLE
        self.result: RoundResult | None = None
        self.player_hand: list[Card] = []
        self.opponent_hand: list[Card] = []
        self._round_id = 0

    def reset(self) -> None:
        """Return to IDLE, dropping any round in progress or resolved."""
        self.state = RoundState.IDLE
        self.result = None
        self.player_hand = []
        self.opponent_hand = []
        self._round_id += 1

    def deal(self, bet: object) -> Iterator[DealStep]:
        """Play a round incrementally.

        Returns an iterator of DealStep, one per card, alternating player and
        opponent, so the caller can pace the reveal. Once it is exhausted the
        controller is RESOLVED and ``self.result`` holds the RoundResult. An
        abandoned iterator leaves the controller DEALING until reset(); once
        reset() or another deal() has run, resuming it raises RoundStateError
        and leaves the controller alone.

        Raises:
            InvalidBetError: if bet is not a positive number.
            RoundStateError: if another round is still being dealt.
        """
        if self.state in (RoundState.DEALING, RoundState.EVALUATING):
            raise RoundStateError(f"Cannot start a round while {self.state}")
        bet = validate_bet(bet)

        self.reset()
        self.state = RoundState.DEALING
        return self._deal(bet, self._round_id)

    def _check_current(self, round_id: int) -> None:
        if round_id != self._round_id:
            raise RoundStateError("This round was discarded by reset() or a newer deal()")

    def _deal(self, bet: float | int, round_id: int) -> Iterator[DealStep]:
        try:
            self._check_current(round_id)
            deck = Deck(self.config.ranks, self.config.suits, rng=self.rng)
            opponent_bet = self.rng.randint(1, self.config.opponent_max_bet)
            draws: list[DealStep] = []

            for i in range(self.config.hand_size):
                for side, hand in ((Side.PLAYER, self.player_hand), (Side.OPPONENT, self.opponent_hand)):
                    card = deck.draw_one()
                    hand.append(card)
                    step = DealStep(index=i, side=side, card=card)
                    draws.append(step)
                    yield step
                    self._check_current(round_id)

            self.state = RoundState.EVALUATING
            player_eval = self.evaluator.evaluate(self.player_hand)
            opponent_eval = self.evaluator.evaluate(self.opponent_hand)
            winner = compare_evaluations(player_eval, opponent_eval)
        except Exception:
            if round_id == self._round_id:
                self.reset()
            raise

        self.result = RoundResult(
            player_hand=tuple(self.player_hand),
            opponent_hand=tuple(self.opponent_hand),
            player_evaluation=player_eval,
            opponent_evaluation=opponent_eval,
            winner=winner,
            bet=bet,
            opponent_bet=opponent_bet,
            draws=tuple(draws),
        )
        self.state = RoundState.RESOLVED
        logger.info(
            "Round resolved: player %s (%s) vs opponent %s (%s) -> %s",
            player_eval.category,
            " ".join(map(str, self.player_hand)),
            opponent_eval.category,
            " ".join(map(str, self.opponent_hand)),
            self.result.winner_label,
        )

    def start_round(self, bet: object) -> RoundResult:
        """Play a full round and return its result."""
        for _ in self.deal(bet):
            pass
        assert self.result is not None
        return self.result


def play_round(config: RoundConfig, bet: object, rng: Random | None = None) -> RoundResult:
    """Play a single stand-alone round."""
    return RoundController(config, rng=rng).start_round(bet)
