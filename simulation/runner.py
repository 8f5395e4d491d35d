"""Batch runner for playing many independent rounds."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from random import Random

from tqdm import tqdm

from poker.comparison import Winner
from poker.game import RoundConfig, RoundController, RoundResult
from poker.hand_evaluator import HandCategory

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for simulation."""

    num_rounds: int = 1000
    bet: int = 10


@dataclass
class SimulationResult:
    """Aggregated outcome of a batch of rounds."""

    rounds_played: int = 0
    player_wins: int = 0
    opponent_wins: int = 0
    ties: int = 0
    tiebreaks: int = 0  # Rounds where both hands shared a category
    player_categories: Counter = field(default_factory=Counter)
    opponent_categories: Counter = field(default_factory=Counter)

    @property
    def player_win_rate(self) -> float:
        return self.player_wins / self.rounds_played if self.rounds_played > 0 else 0.0

    @property
    def tie_rate(self) -> float:
        return self.ties / self.rounds_played if self.rounds_played > 0 else 0.0

    def category_frequency(self, category: HandCategory) -> float:
        """Share of all dealt hands (both sides) that landed in category."""
        hands = 2 * self.rounds_played
        if hands == 0:
            return 0.0
        return (self.player_categories[category] + self.opponent_categories[category]) / hands

    def record(self, result: RoundResult) -> None:
        """Fold a single round into the totals."""
        self.rounds_played += 1
        if result.winner is Winner.SIDE_A:
            self.player_wins += 1
        elif result.winner is Winner.SIDE_B:
            self.opponent_wins += 1
        else:
            self.ties += 1
        if result.decided_by_tiebreak:
            self.tiebreaks += 1
        self.player_categories[result.player_category] += 1
        self.opponent_categories[result.opponent_category] += 1


class RoundRunner:
    """Play independent rounds between the player and the opponent."""

    def __init__(
        self,
        round_config: RoundConfig | None = None,
        config: SimulationConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.round_config = round_config or RoundConfig()
        self.config = config or SimulationConfig()
        self.rng = Random(seed)

    def run(self, progress: bool = False) -> SimulationResult:
        """Play config.num_rounds rounds and aggregate the results.

        Args:
            progress: Show a tqdm progress bar

        Returns:
            SimulationResult with win counts and category tallies
        """
        controller = RoundController(self.round_config, rng=self.rng)
        result = SimulationResult()

        for _ in tqdm(range(self.config.num_rounds), desc="Rounds", disable=not progress):
            result.record(controller.start_round(self.config.bet))
            controller.reset()

        logger.info(
            "Simulated %d rounds: %d player wins, %d opponent wins, %d ties",
            result.rounds_played,
            result.player_wins,
            result.opponent_wins,
            result.ties,
        )
        return result
