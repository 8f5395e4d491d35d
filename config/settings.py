"""Configuration settings for the card duel."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from poker.cards import ALL_SUITS, FULL_RANKS, SHORT_RANKS, Rank, Suit
from poker.exceptions import ConfigError
from poker.game import RoundConfig

DECK_PRESETS: dict[str, tuple[Rank, ...]] = {
    "full": FULL_RANKS,
    "short": SHORT_RANKS,
}


@dataclass
class GameConfig:
    """Game configuration."""

    ranks: tuple[Rank, ...] = FULL_RANKS
    suits: tuple[Suit, ...] = ALL_SUITS
    hand_size: int = 4
    opponent_max_bet: int = 100


@dataclass
class DisplayConfig:
    """Terminal display configuration."""

    reveal_delay: float = 0.5  # Seconds between dealt cards


@dataclass
class SimulationSettings:
    """Batch simulation configuration."""

    seed: int | None = None
    num_rounds: int = 1000
    bet: int = 10


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    simulation: SimulationSettings = field(default_factory=SimulationSettings)

    def round_config(self) -> RoundConfig:
        """Build the validated core round configuration."""
        return RoundConfig(
            ranks=tuple(self.game.ranks),
            suits=tuple(self.game.suits),
            hand_size=self.game.hand_size,
            opponent_max_bet=self.game.opponent_max_bet,
        )


def parse_ranks(value: Any) -> tuple[Rank, ...]:
    """Parse a rank list (symbols) or a preset name ('full', 'short')."""
    if isinstance(value, str):
        if value not in DECK_PRESETS:
            raise ConfigError(f"Unknown deck preset: {value} (expected one of {sorted(DECK_PRESETS)})")
        return DECK_PRESETS[value]
    try:
        return tuple(Rank.from_symbol(str(v)) for v in value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid rank list {value!r}: {e}") from e


def parse_suits(value: Any) -> tuple[Suit, ...]:
    """Parse a suit list of symbols."""
    try:
        return tuple(Suit.from_symbol(str(v)) for v in value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid suit list {value!r}: {e}") from e


def _game_from_dict(data: dict[str, Any]) -> GameConfig:
    data = dict(data)
    if "deck" in data and "ranks" in data:
        raise ConfigError("Give either 'deck' or 'ranks', not both")
    ranks = data.pop("deck", None)
    ranks = data.pop("ranks", ranks)
    suits = data.pop("suits", None)

    game = GameConfig(**data)
    if ranks is not None:
        game.ranks = parse_ranks(ranks)
    if suits is not None:
        game.suits = parse_suits(suits)
    return game


def _check_number(name: str, value: Any, real: bool = False) -> None:
    allowed = (int, float) if real else (int,)
    if isinstance(value, bool) or not isinstance(value, allowed):
        kind = "a number" if real else "an integer"
        raise ConfigError(f"{name} must be {kind}, got {value!r}")


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    config = Config()

    try:
        if "game" in data:
            config.game = _game_from_dict(data["game"])
        if "display" in data:
            config.display = DisplayConfig(**data["display"])
        if "simulation" in data:
            config.simulation = SimulationSettings(**data["simulation"])
    except TypeError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    _check_number("display.reveal_delay", config.display.reveal_delay, real=True)
    _check_number("simulation.num_rounds", config.simulation.num_rounds)
    _check_number("simulation.bet", config.simulation.bet, real=True)
    if config.simulation.seed is not None:
        _check_number("simulation.seed", config.simulation.seed)

    # Fail early on rule-breaking combinations
    config.round_config()
    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": {
            "ranks": [str(r) for r in config.game.ranks],
            "suits": [str(s) for s in config.game.suits],
            "hand_size": config.game.hand_size,
            "opponent_max_bet": config.game.opponent_max_bet,
        },
        "display": {
            "reveal_delay": config.display.reveal_delay,
        },
        "simulation": {
            "seed": config.simulation.seed,
            "num_rounds": config.simulation.num_rounds,
            "bet": config.simulation.bet,
        },
    }

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


# Default configuration
DEFAULT_CONFIG = Config()
