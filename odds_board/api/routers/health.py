"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from odds_board import __version__
from odds_board.api.deps import MatchesDep
from odds_board.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(matches: MatchesDep):
    """Check API health and report how many matches are loaded."""
    return HealthResponse(
        status="ok" if matches else "degraded",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        match_count=len(matches),
    )
