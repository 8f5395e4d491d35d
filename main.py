"""Card duel: you against the computer, four cards each, best hand wins."""

import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import Config, load_config, save_config
from poker.cards import ALL_SUITS, FULL_RANKS, SHORT_RANKS
from poker.exceptions import PokerError
from poker.game import RoundController, Side
from poker.hand_evaluator import evaluate_hand, reachable_categories
from simulation.runner import RoundRunner, SimulationConfig
from ui.display import (
    print_divider,
    render_category_table,
    render_evaluation,
    render_hand,
    render_round_header,
    render_round_result,
)

app = typer.Typer(
    name="poker-duel",
    help="Two-player card duel: deal, classify and compare hands.",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _build_config(
    config_path: Optional[Path],
    short_deck: bool,
    hand_size: Optional[int],
) -> Config:
    """Load the config file (if any) and apply command line overrides."""
    config = load_config(config_path) if config_path is not None else Config()
    if short_deck:
        config.game.ranks = SHORT_RANKS
    if hand_size is not None:
        config.game.hand_size = hand_size
    return config


@app.command()
def play(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    short_deck: bool = typer.Option(False, "--short-deck", help="Use the 32-card 7..A deck"),
    hand_size: Optional[int] = typer.Option(None, "--hand-size", "-k", help="Cards per hand"),
    bet: Optional[str] = typer.Option(None, "--bet", "-b", help="Bet amount (prompted if omitted)"),
    rounds: int = typer.Option(1, "--rounds", "-n", help="Rounds to play"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    fast: bool = typer.Option(False, "--fast", help="No delay between dealt cards"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log round results"),
) -> None:
    """Play rounds against the computer with a progressive reveal."""
    _setup_logging(verbose)
    try:
        config = _build_config(config_path, short_deck, hand_size)
        controller = RoundController(config.round_config(), seed=seed)
    except (PokerError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    delay = 0.0 if fast else config.display.reveal_delay
    k = controller.config.hand_size

    for i in range(rounds):
        console.print(render_round_header(f"Round {i + 1}/{rounds}"))
        amount = bet if bet is not None else typer.prompt("Your bet")

        try:
            steps = controller.deal(amount)
        except PokerError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

        for step in steps:
            who = "[green]You[/green]     " if step.side is Side.PLAYER else "[red]Opponent[/red]"
            hand = controller.player_hand if step.side is Side.PLAYER else controller.opponent_hand
            evaluation = evaluate_hand(hand, controller.config.ranks)
            console.print(f"{who} {render_hand(hand, k)}  {render_evaluation(evaluation)}")
            if delay > 0:
                time.sleep(delay)

        assert controller.result is not None
        console.print(render_round_result(controller.result))
        print_divider(console)
        controller.reset()


@app.command()
def simulate(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    short_deck: bool = typer.Option(False, "--short-deck", help="Use the 32-card 7..A deck"),
    hand_size: Optional[int] = typer.Option(None, "--hand-size", "-k", help="Cards per hand"),
    rounds: Optional[int] = typer.Option(None, "--rounds", "-n", help="Rounds to simulate"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """Play many rounds automatically and report outcome statistics."""
    _setup_logging(verbose)
    try:
        config = _build_config(config_path, short_deck, hand_size)
        round_config = config.round_config()
    except (PokerError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    sim = SimulationConfig(
        num_rounds=rounds if rounds is not None else config.simulation.num_rounds,
        bet=config.simulation.bet,
    )
    runner = RoundRunner(round_config, sim, seed=seed if seed is not None else config.simulation.seed)
    result = runner.run(progress=True)

    table = Table(title=f"Simulation Results ({result.rounds_played} rounds)")
    table.add_column("Outcome", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right", style="green")
    for label, count in (
        ("Player wins", result.player_wins),
        ("Opponent wins", result.opponent_wins),
        ("Ties", result.ties),
        ("Decided by tie-break", result.tiebreaks),
    ):
        share = count / result.rounds_played if result.rounds_played else 0.0
        table.add_row(label, str(count), f"{share * 100:5.1f}%")
    console.print(table)

    reachable = reachable_categories(
        round_config.hand_size, len(round_config.ranks), len(round_config.suits)
    )
    frequencies = {c: result.category_frequency(c) for c in reachable}
    console.print(render_category_table(reachable, frequencies))


@app.command()
def categories(
    short_deck: bool = typer.Option(False, "--short-deck", help="Use the 32-card 7..A deck"),
    hand_size: int = typer.Option(4, "--hand-size", "-k", help="Cards per hand"),
) -> None:
    """Show which hand categories a deck and hand size can produce."""
    num_ranks = len(SHORT_RANKS if short_deck else FULL_RANKS)
    try:
        reachable = reachable_categories(hand_size, num_ranks, len(ALL_SUITS))
    except PokerError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]{num_ranks} ranks x {len(ALL_SUITS)} suits, {hand_size} cards per hand[/bold]")
    console.print(render_category_table(reachable))


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    save: Optional[Path] = typer.Option(None, "--save", help="Write the effective config to this path"),
) -> None:
    """Show the effective configuration."""
    try:
        config = _build_config(config_path, False, None)
    except (PokerError, FileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Game", "Ranks", " ".join(str(r) for r in config.game.ranks))
    table.add_row("Game", "Suits", " ".join(str(s) for s in config.game.suits))
    table.add_row("Game", "Hand size", str(config.game.hand_size))
    table.add_row("Game", "Opponent max bet", str(config.game.opponent_max_bet))
    table.add_row("Display", "Reveal delay", f"{config.display.reveal_delay}s")
    table.add_row("Simulation", "Rounds", str(config.simulation.num_rounds))
    table.add_row("Simulation", "Bet", str(config.simulation.bet))
    table.add_row("Simulation", "Seed", str(config.simulation.seed))

    console.print(table)

    if save is not None:
        save_config(config, save)
        console.print(f"Saved config to [cyan]{save}[/cyan]")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
