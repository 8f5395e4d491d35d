"""Display utilities for the terminal card duel."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker.cards import Card, Suit
from poker.comparison import Winner
from poker.game import RoundResult
from poker.hand_evaluator import HandCategory, HandEvaluation


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    return f"[{color}][{card}][/{color}]"


def render_hand(cards: list[Card] | tuple[Card, ...], hand_size: int) -> str:
    """Render a hand with placeholders for cards not dealt yet."""
    if hand_size == 0:
        return "[dim]No cards[/dim]"
    rendered = []
    for i in range(hand_size):
        if i < len(cards):
            rendered.append(render_card(cards[i]))
        else:
            rendered.append("[dim][ ? ][/dim]")
    return " ".join(rendered)


def render_evaluation(evaluation: HandEvaluation | None) -> str:
    """Render the category line of a hand."""
    if evaluation is None:
        return "[dim]Waiting...[/dim]"
    return f"[bold]{evaluation.category!s}[/bold] [dim]({evaluation.primary_rank!s})[/dim]"


def render_round_header(title: str) -> Panel:
    """Render a round header."""
    return Panel(
        Text(title, justify="center", style="bold yellow"),
        border_style="blue",
    )


def render_round_result(result: RoundResult) -> Panel:
    """Render the result of a round."""
    hand_size = len(result.player_hand)
    lines = [
        f"[green]You[/green]       {render_hand(result.player_hand, hand_size)}",
        f"           {render_evaluation(result.player_evaluation)}",
        f"           Bet: [bold]{result.bet}[/bold]",
        "",
        f"[red]Opponent[/red]  {render_hand(result.opponent_hand, hand_size)}",
        f"           {render_evaluation(result.opponent_evaluation)}",
        f"           Bet: {result.opponent_bet}",
        "",
    ]

    if result.winner is Winner.SIDE_A:
        lines.append("[bold green]You won![/bold green]")
        border = "green"
    elif result.winner is Winner.SIDE_B:
        lines.append("[bold red]You lost.[/bold red]")
        border = "red"
    else:
        lines.append("[bold yellow]It's a tie.[/bold yellow]")
        border = "yellow"

    if result.decided_by_tiebreak and result.winner is not Winner.TIE:
        lines.append("[dim]Same category, decided card by card.[/dim]")

    return Panel("\n".join(lines), title="Round Result", border_style=border)


def render_category_table(
    reachable: list[HandCategory],
    frequencies: dict[HandCategory, float] | None = None,
) -> Table:
    """Render every category with its reachability (and frequency if known)."""
    table = Table(title="Hand Categories")
    table.add_column("Rank", style="dim")
    table.add_column("Category", style="cyan")
    table.add_column("Reachable")
    if frequencies is not None:
        table.add_column("Frequency", justify="right", style="green")

    for category in sorted(HandCategory, reverse=True):
        row = [
            str(category.value),
            str(category),
            "[green]yes[/green]" if category in reachable else "[red]no[/red]",
        ]
        if frequencies is not None:
            row.append(f"{frequencies.get(category, 0.0) * 100:5.1f}%")
        table.add_row(*row)

    return table


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
