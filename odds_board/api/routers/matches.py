"""Match board endpoints - normalized odds tables and search suggestions."""

from fastapi import APIRouter, HTTPException, Path, Query

from odds_board.api.deps import MatchesDep, SettingsDep
from odds_board.api.schemas import MatchListResponse, MatchViewResponse, SuggestionResponse
from odds_board.board import build_board, build_match_view
from odds_board.search import suggest_matches, suggestion_label

router = APIRouter(tags=["matches"])


@router.get("/matches", response_model=MatchListResponse)
async def list_matches(
    matches: MatchesDep,
    settings: SettingsDep,
    q: str = Query("", max_length=100, description="Match ID substring"),
):
    """List displayable matches whose ID contains `q`, with their odds tables."""
    views = build_board(matches, q, include_inactive=settings.include_inactive_markets)
    responses = [MatchViewResponse.from_view(view) for view in views]
    return MatchListResponse(matches=responses, total=len(responses), query=q)


@router.get("/matches/{match_id}", response_model=MatchViewResponse)
async def get_match(
    matches: MatchesDep,
    settings: SettingsDep,
    match_id: str = Path(..., max_length=100),
):
    """Odds tables for a single match."""
    match = next((m for m in matches if m.id == match_id), None)
    if match is None:
        raise HTTPException(status_code=404, detail=f"Match {match_id} not found.")

    view = build_match_view(match, include_inactive=settings.include_inactive_markets)
    if view is None:
        raise HTTPException(
            status_code=404,
            detail=f"Match {match_id} is missing teams, date or odds.",
        )
    return MatchViewResponse.from_view(view)


@router.get("/suggestions", response_model=list[SuggestionResponse])
async def list_suggestions(
    matches: MatchesDep,
    settings: SettingsDep,
    q: str = Query(..., min_length=1, max_length=100, description="Match ID substring"),
):
    """Autocomplete suggestions for the search box."""
    return [
        SuggestionResponse(match_id=match.id, label=suggestion_label(match))
        for match in suggest_matches(matches, q, settings.suggestion_limit)
    ]
