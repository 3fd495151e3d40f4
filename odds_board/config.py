"""Configuration management for odds-board.

Settings are loaded from environment variables (and a `.env` file) using
pydantic-settings. Every setting has a default, so a bare checkout runs
against the bundled `data.json`.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    - DATASET_PATH: Bundled odds dataset (default: data.json)
    - ENVIRONMENT: "production" for JSON logs, anything else for console logs
    - SUGGESTION_LIMIT: Maximum autocomplete suggestions (default: 5)
    - INCLUDE_INACTIVE_MARKETS: Also show suspended markets (default: false)
    - PAGE_TITLE: Heading of the HTML page
    """

    dataset_path: Path = Field(default=Path("data.json"))
    environment: str = Field(default="development")
    suggestion_limit: int = Field(default=5, ge=1, le=50)
    include_inactive_markets: bool = Field(default=False)
    page_title: str = Field(default="MLB Betting Odds", max_length=200)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton).

    Returns:
        Settings instance with validated configuration

    Raises:
        ValidationError: If an environment value is invalid
    """
    return Settings()
