"""Single-page HTML rendering of the odds board.

Builds a self-contained page: search box, autocomplete suggestions, and per
match a header followed by one table per non-empty betting type. All text is
escaped; the page needs no scripts.
"""

import html as _html_escape
from collections.abc import Sequence
from urllib.parse import urlencode

from odds_board.board import MatchView
from odds_board.data.models import Match, OddsTable
from odds_board.render.console import format_cell
from odds_board.search import suggestion_label

_STYLE = """
body { font-family: system-ui, sans-serif; margin: 0; background: #f9fafb; color: #111827; }
main { max-width: 80rem; margin: 0 auto; padding: 1.5rem; }
h1 { font-size: 1.75rem; }
.search input { width: 100%; padding: .75rem; border: 1px solid #d1d5db; border-radius: .5rem; }
.suggestions { background: #fff; border: 1px solid #e5e7eb; border-radius: .5rem; margin-top: .25rem; }
.suggestions a { display: block; padding: .5rem 1rem; color: inherit; text-decoration: none; }
.suggestions a:hover { background: #f3f4f6; }
.match-header { display: flex; justify-content: space-between; align-items: center;
  background: #f3f4f6; padding: 1rem; border-radius: .5rem; margin-top: 2rem; }
.match-time { text-align: center; font-size: .875rem; color: #4b5563; }
.odds-table { background: #fff; border-radius: .5rem; padding: 1rem; margin-top: 1rem;
  box-shadow: 0 1px 3px rgba(0,0,0,.1); overflow-x: auto; }
table { border-collapse: collapse; min-width: 100%; }
th, td { border: 1px solid #e5e7eb; padding: .5rem 1rem; font-size: .875rem; white-space: nowrap; }
th { text-align: left; color: #374151; }
td { color: #4b5563; }
td.bookmaker { color: #6b7280; }
.empty { text-align: center; color: #6b7280; }
"""


def _e(s: object) -> str:
    """HTML-escape a value."""
    return _html_escape.escape(str(s))


def render_table_html(table: OddsTable) -> str:
    """One category table, or "" when it has no headers or no rows.

    A "Bookmaker" column leads the table when rows carry bookmaker labels.
    """
    if table.is_empty:
        return ""

    show_labels = any(table.row_labels)
    head = "".join(f"<th>{_e(header or 'N/A')}</th>" for header in table.headers)
    if show_labels:
        head = "<th>Bookmaker</th>" + head

    body = []
    for index, row in enumerate(table.rows):
        cells = "".join(f"<td>{_e(format_cell(cell))}</td>" for cell in row)
        if show_labels:
            label = table.row_labels[index] if index < len(table.row_labels) else ""
            cells = f'<td class="bookmaker">{_e(label)}</td>' + cells
        body.append(f"<tr>{cells}</tr>")

    return (
        '<div class="odds-table">'
        f"<h3>{_e(table.title)}</h3>"
        f"<table><thead><tr>{head}</tr></thead><tbody>{''.join(body)}</tbody></table>"
        "</div>"
    )


def render_match_html(view: MatchView) -> str:
    tables = "".join(render_table_html(table) for table in view.tables)
    return (
        '<section class="match">'
        '<div class="match-header">'
        f"<h2>{_e(view.home)}</h2>"
        '<div class="match-time">'
        f"<div>{_e(view.date)}</div>"
        f"<div>Match ID: {_e(view.match_id)}</div>"
        "</div>"
        f"<h2>{_e(view.away)}</h2>"
        "</div>"
        f"{tables}"
        "</section>"
    )


def render_suggestions_html(suggestions: Sequence[Match]) -> str:
    """Suggestion links; following one selects that match ID as the query."""
    if not suggestions:
        return ""
    links = "".join(
        f'<a href="/?{_e(urlencode({"q": match.id, "picked": 1}))}">{_e(suggestion_label(match))}</a>'
        for match in suggestions
    )
    return f'<div class="suggestions">{links}</div>'


def render_page(
    views: Sequence[MatchView],
    query: str = "",
    suggestions: Sequence[Match] = (),
    title: str = "MLB Betting Odds",
) -> str:
    """Full HTML page for the board.

    Args:
        views: Match views to display, in order
        query: Current search text (echoed into the search box)
        suggestions: Suggestions to list under the search box
        title: Page title and heading

    Returns:
        HTML document as a string
    """
    if views:
        content = "".join(render_match_html(view) for view in views)
    elif query:
        content = f'<p class="empty">No matches found for ID "{_e(query)}"</p>'
    else:
        content = '<p class="empty">No matches available</p>'

    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head>'
        '<meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f'<meta name="description" content="{_e(title)} Table">'
        f"<title>{_e(title)}</title>"
        f"<style>{_STYLE}</style>"
        "</head><body><main>"
        f"<h1>{_e(title)}</h1>"
        '<form class="search" method="get" action="/">'
        f'<input type="text" name="q" value="{_e(query)}" '
        'placeholder="Search by Match ID..." autocomplete="off">'
        "</form>"
        f"{render_suggestions_html(suggestions)}"
        f"{content}"
        "</main></body></html>"
    )
