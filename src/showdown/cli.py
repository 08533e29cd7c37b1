"""Command-line showdown evaluator."""

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .card import Card, card
from .config import get_config
from .evaluator import EvaluationOutcome, evaluate_hands, evaluate_request
from .hand import classify

app = typer.Typer(help="Texas Hold'em showdown evaluator")
console = Console()
err_console = Console(stderr=True)


def format_card(c: Card) -> str:
    """Format a card with color based on suit."""
    if get_config().display.suit_symbols:
        symbol = str(c)
    else:
        symbol = c.code
    if c.suit.is_red:
        return f"[red]{symbol}[/red]"
    return f"[white]{symbol}[/white]"


def format_cards(cards: list[Card] | tuple[Card, ...]) -> str:
    """Format multiple cards."""
    return " ".join(format_card(c) for c in cards)


def parse_cards(s: str) -> list[Card]:
    """Parse space or comma separated cards."""
    s = s.replace(",", " ")
    parts = s.split()
    return [card(p) for p in parts if p]


def _print_outcome(outcome: EvaluationOutcome) -> None:
    console.print(f"\n[bold]Board:[/bold] {format_cards(outcome.community)}\n")

    table = Table(title="Showdown")
    table.add_column("#", justify="right")
    table.add_column("Player", style="cyan")
    table.add_column("Hole")
    table.add_column("Hand")
    table.add_column("Best Five")

    for i, player in enumerate(outcome.ranked, 1):
        style = "bold green" if player.player_id in outcome.winners else ""
        table.add_row(
            str(i),
            player.player_id,
            format_cards(player.hole_cards),
            player.best.name,
            format_cards(player.best.cards),
            style=style,
        )

    console.print(table)
    console.print(
        Panel(
            f"[bold green]{outcome.winner}[/bold green]",
            title="Split Pot" if outcome.is_split else "Winner",
            expand=False,
        )
    )
    console.print(outcome.explanation, markup=False)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
):
    """Texas Hold'em showdown evaluator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def evaluate(
    me: str = typer.Option(..., "--me", "-m", help="Your hole cards (e.g., 'AH KH')"),
    vs: list[str] = typer.Option(..., "--vs", "-v", help="An opponent's hole cards; repeat per opponent"),
    board: str = typer.Option(..., "--board", "-b", help="Community cards (3-5 cards)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Rank every player's best hand and declare the winner."""
    try:
        config = get_config()
        outcome = evaluate_hands(
            parse_cards(me),
            [parse_cards(h) for h in vs],
            parse_cards(board),
            max_opponents=config.evaluation.max_opponents,
        )
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(outcome.to_dict(), indent=2))
    else:
        _print_outcome(outcome)


@app.command(name="classify")
def classify_command(
    cards: str = typer.Argument(..., help="Exactly 5 cards (e.g., 'AS KS QS JS TS')"),
):
    """Classify a single 5-card hand."""
    try:
        get_config()  # card formatting below reads the display settings
        result = classify(parse_cards(cards))
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Cards:[/bold] {format_cards(result.cards)}")
    console.print(f"[bold]Hand:[/bold]  {result.name} ({int(result.category)})")
    console.print(f"[bold]Key:[/bold]   {list(result.key)}")


@app.command()
def request(
    path: Path | None = typer.Argument(None, help="JSON request file (default: stdin)"),
):
    """Evaluate a JSON request and print the JSON response."""
    try:
        config = get_config()
        raw = path.read_text() if path else sys.stdin.read()
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Request must be a JSON object")
        response = evaluate_request(data, max_opponents=config.evaluation.max_opponents)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    typer.echo(json.dumps(response, indent=2))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
