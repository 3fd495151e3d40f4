"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends, Request

from odds_board.config import Settings, get_settings
from odds_board.data.models import Match


def get_app_settings() -> Settings:
    """Get application settings for FastAPI dependency injection."""
    return get_settings()


def get_matches(request: Request) -> list[Match]:
    """Matches loaded once at startup by the application lifespan."""
    return request.app.state.matches


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
MatchesDep = Annotated[list[Match], Depends(get_matches)]
