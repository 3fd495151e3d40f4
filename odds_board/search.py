"""Match search and autocomplete.

Matching is a plain case-insensitive substring test on the match identifier.
There is no ranking beyond input order and no fuzzy matching.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from odds_board.data.models import Match

DEFAULT_SUGGESTION_LIMIT = 5


def _matches_query(match: Match, query: str) -> bool:
    return match.id is not None and query.lower() in match.id.lower()


def filter_matches(matches: Sequence[Match], query: str) -> list[Match]:
    """Filter matches whose identifier contains the query.

    Args:
        matches: All loaded matches
        query: Search text; empty means no filter

    Returns:
        Matching matches in input order
    """
    if not query:
        return list(matches)
    return [match for match in matches if _matches_query(match, query)]


def suggest_matches(
    matches: Sequence[Match],
    query: str,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[Match]:
    """Autocomplete suggestions: the filtered matches, at most `limit` of them."""
    return [match for match in matches if _matches_query(match, query)][:limit]


def suggestion_label(match: Match) -> str:
    """Display text for a suggestion (e.g., "Match ID: 10238 - Yankees vs Red Sox")."""
    label = f"Match ID: {match.id}"
    if match.home_name and match.away_name:
        label += f" - {match.home_name} vs {match.away_name}"
    return label


@dataclass
class SearchState:
    """Search box state for one view.

    Attributes:
        query: Current search text
        show_suggestions: Whether the suggestion list is visible
        limit: Maximum number of suggestions
    """

    query: str = ""
    show_suggestions: bool = False
    limit: int = DEFAULT_SUGGESTION_LIMIT

    def type(self, text: str) -> None:
        self.query = text
        self.show_suggestions = len(text) > 0

    def focus(self) -> None:
        self.show_suggestions = len(self.query) > 0

    def blur(self) -> None:
        self.show_suggestions = False

    def select(self, match: Match) -> None:
        """Pick a suggestion: the query becomes its identifier and the list closes."""
        self.query = match.id or ""
        self.show_suggestions = False

    def results(self, matches: Sequence[Match]) -> list[Match]:
        return filter_matches(matches, self.query)

    def visible_suggestions(self, matches: Sequence[Match]) -> list[Match]:
        if not self.show_suggestions:
            return []
        return suggest_matches(matches, self.query, self.limit)
