"""Assemble per-match views for the display surfaces."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from odds_board.data.models import Match, OddsTable
from odds_board.monitoring import get_logger
from odds_board.normalizer import build_match_tables
from odds_board.search import filter_matches

log = get_logger(__name__)


@dataclass
class MatchView:
    """Everything needed to display one match.

    Attributes:
        match_id: Match identifier
        home: Home team name
        away: Away team name
        date: Match date as given by the feed
        tables: Non-empty odds tables, in feed order
    """

    match_id: str
    home: str
    away: str
    date: str
    tables: list[OddsTable] = field(default_factory=list)


def build_match_view(match: Match, include_inactive: bool = False) -> MatchView | None:
    """Build the view for one match, or None if it lacks display fields."""
    if not match.is_displayable:
        log.debug("match_not_displayable", match_id=match.id)
        return None

    tables = [
        table
        for table in build_match_tables(match, include_inactive=include_inactive)
        if not table.is_empty
    ]
    return MatchView(
        match_id=match.id,
        home=match.home_name,
        away=match.away_name,
        date=match.date,
        tables=tables,
    )


def build_board(
    matches: Sequence[Match],
    query: str = "",
    include_inactive: bool = False,
) -> list[MatchView]:
    """Views for every displayable match whose identifier contains `query`."""
    views = []
    for match in filter_matches(matches, query):
        view = build_match_view(match, include_inactive=include_inactive)
        if view is not None:
            views.append(view)
    return views
