"""HTML page: search box, suggestions and the odds board."""

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from odds_board.api.deps import MatchesDep, SettingsDep
from odds_board.board import build_board
from odds_board.render.html import render_page
from odds_board.search import SearchState

router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
async def board_page(
    matches: MatchesDep,
    settings: SettingsDep,
    q: str = Query("", max_length=100),
    picked: bool = Query(False, description="Query came from a suggestion link"),
):
    """Render the board for the current query.

    A typed query lists suggestions; following a suggestion link selects that
    match ID and closes the list.
    """
    state = SearchState(limit=settings.suggestion_limit)
    state.type(q)
    if picked:
        selected = next((match for match in matches if match.id == q), None)
        if selected is not None:
            state.select(selected)

    views = build_board(matches, state.query, include_inactive=settings.include_inactive_markets)
    return HTMLResponse(
        content=render_page(
            views,
            query=state.query,
            suggestions=state.visible_suggestions(matches),
            title=settings.page_title,
        )
    )
