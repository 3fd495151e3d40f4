"""Tests for per-match view assembly."""

from odds_board.board import build_board, build_match_view


def test_board_skips_incomplete_matches(matches):
    """10239 has no away team name: skipped without raising."""
    views = build_board(matches)
    assert [v.match_id for v in views] == ["10238", "99"]


def test_board_filters_by_query(matches):
    assert [v.match_id for v in build_board(matches, "1023")] == ["10238"]
    assert build_board(matches, "10239") == []


def test_view_header_fields(matches):
    view = build_match_view(matches[0])
    assert view.home == "New York Yankees"
    assert view.away == "Boston Red Sox"
    assert view.date == "Apr 12"


def test_view_keeps_only_non_empty_active_tables(matches):
    view = build_match_view(matches[0])
    assert [t.title for t in view.tables] == [
        "Home/Away",
        "Handicap",
        "Over/Under",
        "Correct Score",
    ]


def test_view_with_inactive_markets(matches):
    view = build_match_view(matches[0], include_inactive=True)
    assert "Odd/Even" in [t.title for t in view.tables]


def test_incomplete_match_has_no_view(matches):
    assert build_match_view(matches[2]) is None
