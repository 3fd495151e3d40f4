"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from odds_board import __version__
from odds_board.api.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from odds_board.api.routers import health, matches, page
from odds_board.config import get_settings
from odds_board.data.loader import load_matches
from odds_board.monitoring import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load the dataset once.

    A missing or malformed dataset raises DatasetError here, so the server
    fails at startup instead of serving an empty board.
    """
    settings = get_settings()
    configure_logging(settings.environment)
    app.state.matches = load_matches(settings.dataset_path)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Odds Board",
        description="Normalized sports-betting odds tables from a bundled dataset",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware runs in reverse order of registration
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    app.include_router(health.router, prefix="/api")
    app.include_router(matches.router, prefix="/api")
    app.include_router(page.router)

    return app
