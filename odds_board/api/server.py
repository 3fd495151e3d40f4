"""Uvicorn entry point for the odds board server."""

import os

import uvicorn
from dotenv import load_dotenv


def main():
    """Start the odds board server."""
    load_dotenv()

    host = os.getenv("DASHBOARD_HOST", "127.0.0.1")
    port = int(os.getenv("DASHBOARD_PORT", "8000"))
    reload = os.getenv("DASHBOARD_RELOAD", "false").lower() == "true"

    uvicorn.run(
        "odds_board.api.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )


if __name__ == "__main__":
    main()
