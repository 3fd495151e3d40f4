"""Rich renderers for odds tables and match headers.

Terminal counterpart of the HTML page: one panel per match followed by one
table per non-empty betting type.
"""

from collections.abc import Sequence

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from odds_board.board import MatchView
from odds_board.data.models import PLACEHOLDER, Cell, Match, OddsTable
from odds_board.normalizer.prices import format_price
from odds_board.search import suggestion_label


def format_cell(cell: Cell | None) -> str:
    """Display text for a table cell (floats in shortest form, None as placeholder)."""
    if cell is None:
        return PLACEHOLDER
    if isinstance(cell, float):
        return format_price(cell)
    return cell


def render_odds_table(table: OddsTable) -> Table | None:
    """Format a normalized table as a Rich table.

    Args:
        table: Normalized odds table

    Returns:
        Rich Table, or None when the table has no headers or no rows
    """
    if table.is_empty:
        return None

    show_labels = any(table.row_labels)
    rich_table = Table(
        title=escape(table.title),
        title_justify="left",
        show_header=True,
        header_style="bold cyan",
    )

    if show_labels:
        rich_table.add_column("Bookmaker", style="dim", no_wrap=True)
    for header in table.headers:
        rich_table.add_column(escape(header or "N/A"), justify="right", no_wrap=True)

    for index, row in enumerate(table.rows):
        cells = [escape(format_cell(cell)) for cell in row]
        # Rows built before a later bookmaker added outcomes are shorter
        cells += [""] * (len(table.headers) - len(cells))
        if show_labels:
            label = table.row_labels[index] if index < len(table.row_labels) else ""
            cells.insert(0, escape(label))
        rich_table.add_row(*cells)

    return rich_table


def render_match_header(view: MatchView) -> Panel:
    """Header panel: teams, date and match ID."""
    content = (
        f"[bold white]{escape(view.home)}[/bold white]"
        f"  [dim]vs[/dim]  "
        f"[bold white]{escape(view.away)}[/bold white]\n"
        f"[cyan]{escape(view.date)}[/cyan]  [dim]Match ID: {escape(view.match_id)}[/dim]"
    )
    return Panel(content, border_style="cyan", expand=False)


def render_match(view: MatchView) -> Group:
    """Header panel followed by every table of the match."""
    parts: list = [render_match_header(view)]
    for table in view.tables:
        rendered = render_odds_table(table)
        if rendered is not None:
            parts.append(rendered)
    if len(parts) == 1:
        parts.append("[dim]No odds available[/dim]")
    return Group(*parts)


def render_suggestions(matches: Sequence[Match]) -> Table:
    """Suggestion list as a single-column table."""
    table = Table(title="Suggestions", show_header=False, title_justify="left")
    table.add_column("Match", style="white")
    if not matches:
        table.add_row("[dim]No matching match IDs[/dim]")
        return table
    for match in matches:
        table.add_row(escape(suggestion_label(match)))
    return table
