"""Typer CLI entry point for browsing the odds board in a terminal.

- odds-board show 1023
- odds-board suggest 10
- odds-board version
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file before settings are read
load_dotenv()

import typer
from rich.console import Console

from odds_board import __version__
from odds_board.board import build_board
from odds_board.config import get_settings
from odds_board.data.loader import DatasetError, load_matches
from odds_board.monitoring import configure_logging
from odds_board.render.console import render_match, render_suggestions
from odds_board.search import suggest_matches

cli = typer.Typer(
    name="odds-board",
    help="""Odds Board - browse normalized betting odds from a bundled dataset.

QUICK START:
  odds-board show                 # every match
  odds-board show 1023            # matches whose ID contains 1023
  odds-board suggest 10           # match ID suggestions
""",
    add_completion=False,
)

# Disable colors if NO_COLOR env var is set (standard convention)
console = Console(no_color=os.getenv("NO_COLOR") is not None)


def _load(data: Optional[Path]):
    path = data or get_settings().dataset_path
    try:
        return load_matches(path)
    except DatasetError as e:
        console.print(f"[bold red]Error:[/bold red] {e}", style="red")
        raise typer.Exit(code=1)


@cli.command()
def show(
    query: str = typer.Argument("", help="Match ID or part of one (empty shows all)"),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Dataset path (default from DATASET_PATH)"),
    all_markets: bool = typer.Option(False, "--all-markets", "-a", help="Include suspended markets"),
):
    """Show odds tables for matches whose ID contains QUERY."""
    matches = _load(data)
    include_inactive = all_markets or get_settings().include_inactive_markets
    views = build_board(matches, query, include_inactive=include_inactive)

    if not views:
        if query:
            console.print(f'[dim]No matches found for ID "{query}"[/dim]')
        else:
            console.print("[dim]No matches available[/dim]")
        return

    for view in views:
        console.print(render_match(view))
        console.print()


@cli.command()
def suggest(
    query: str = typer.Argument(..., help="Match ID prefix or fragment"),
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="Dataset path (default from DATASET_PATH)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max suggestions (default from SUGGESTION_LIMIT)"),
):
    """List match ID suggestions for QUERY."""
    matches = _load(data)
    suggestions = suggest_matches(matches, query, limit or get_settings().suggestion_limit)
    console.print(render_suggestions(suggestions))


@cli.command()
def version():
    """Show version and configuration info."""
    settings = get_settings()
    console.print(f"[bold cyan]Odds Board[/bold cyan] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Dataset: {settings.dataset_path}")
    console.print(f"  Suggestion limit: {settings.suggestion_limit}")
    console.print(f"  Suspended markets: {'shown' if settings.include_inactive_markets else 'hidden'}")


def main():
    """Entry point for CLI."""
    # Use production mode if LOG_MODE=production, otherwise development
    configure_logging(os.getenv("LOG_MODE", "development"))
    cli()


if __name__ == "__main__":
    main()
