"""Pydantic models for the bundled odds dataset and the derived tables.

The raw feed is loosely shaped: any collection may arrive as a list, a single
object, or not at all, and scalars may be strings or numbers. Models accept
all of these and normalize them, so downstream code only sees lists of
models and optional strings. Nothing here raises on a malformed leaf value;
unusable values become None or are dropped.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

PLACEHOLDER = "-"

Cell = float | str


def as_text(value: Any) -> str | None:
    """Coerce a scalar feed value to a stripped string, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def as_list(value: Any) -> list[dict]:
    """Wrap a single object in a list and drop entries that are not objects."""
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, dict)]
    return []


class FeedModel(BaseModel):
    """Base for raw feed models: unknown keys are ignored, data is read-only."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class OddEntry(FeedModel):
    """Single quoted outcome.

    Attributes:
        name: Outcome label ("Home", "2:1", "Over")
        value: Decimal price as it appears in the feed
        us: Moneyline (American) encoding of the price, if quoted
    """

    name: str | None = None
    value: str | None = None
    us: str | None = None

    @field_validator("name", "value", "us", mode="before")
    @classmethod
    def _scalar(cls, v: Any) -> str | None:
        return as_text(v)


class LineGroup(FeedModel):
    """Odd entries quoted at one handicap or total line.

    Attributes:
        name: Line label (e.g., "-1.5", "2.5", "0, -0.5")
        odd: Entries quoted at this line
    """

    name: str | None = None
    odd: list[OddEntry] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _scalar(cls, v: Any) -> str | None:
        return as_text(v)

    @field_validator("odd", mode="before")
    @classmethod
    def _entries(cls, v: Any) -> list[dict]:
        return as_list(v)


class BookmakerQuote(FeedModel):
    """One bookmaker's odds for a betting type.

    Direct markets fill `odd`; handicap and over/under markets nest their
    entries by line under `handicap` or `total`.
    """

    id: str | None = None
    name: str | None = None
    odd: list[OddEntry] = Field(default_factory=list)
    handicap: list[LineGroup] = Field(default_factory=list)
    total: list[LineGroup] = Field(default_factory=list)

    @field_validator("id", "name", mode="before")
    @classmethod
    def _scalar(cls, v: Any) -> str | None:
        return as_text(v)

    @field_validator("odd", "handicap", "total", mode="before")
    @classmethod
    def _entries(cls, v: Any) -> list[dict]:
        return as_list(v)


class OddsType(FeedModel):
    """Betting-market category for a match.

    Attributes:
        value: Category name (e.g., "3Way Result", "Asian Handicap")
        id: Feed identifier of the category
        stop: True when the market is suspended
        bookmaker: Quotes from each bookmaker
    """

    value: str | None = None
    id: str | None = None
    stop: bool = False
    bookmaker: list[BookmakerQuote] = Field(default_factory=list)

    @field_validator("value", "id", mode="before")
    @classmethod
    def _scalar(cls, v: Any) -> str | None:
        return as_text(v)

    @field_validator("stop", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        if isinstance(v, bool):
            return v
        text = as_text(v)
        return text is not None and text.lower() in ("true", "1", "yes")

    @field_validator("bookmaker", mode="before")
    @classmethod
    def _entries(cls, v: Any) -> list[dict]:
        return as_list(v)

    @property
    def is_active(self) -> bool:
        return not self.stop


class Team(FeedModel):
    id: str | None = None
    name: str | None = None

    @field_validator("id", "name", mode="before")
    @classmethod
    def _scalar(cls, v: Any) -> str | None:
        return as_text(v)


class MatchOdds(FeedModel):
    type: list[OddsType] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def _entries(cls, v: Any) -> list[dict]:
        return as_list(v)


class Match(FeedModel):
    """A fixture with its odds, as found in the bundled dataset.

    Attributes:
        id: Match identifier (numbers are held as strings)
        localteam: Home team
        awayteam: Away team
        date: Match date as given by the feed
        time: Kick-off time, if present
        odds: Betting types quoted for this match
    """

    id: str | None = None
    localteam: Team | None = None
    awayteam: Team | None = None
    date: str | None = None
    time: str | None = None
    odds: MatchOdds | None = None

    @field_validator("id", "date", "time", mode="before")
    @classmethod
    def _scalar(cls, v: Any) -> str | None:
        return as_text(v)

    @field_validator("localteam", "awayteam", "odds", mode="before")
    @classmethod
    def _object(cls, v: Any) -> dict | None:
        return v if isinstance(v, dict) else None

    @property
    def home_name(self) -> str | None:
        return self.localteam.name if self.localteam else None

    @property
    def away_name(self) -> str | None:
        return self.awayteam.name if self.awayteam else None

    @property
    def odds_types(self) -> list[OddsType]:
        return list(self.odds.type) if self.odds else []

    @property
    def is_displayable(self) -> bool:
        """True when the match has everything its header and tables need."""
        return bool(
            self.home_name and self.away_name and self.date and self.odds_types
        )


class OddsTable(BaseModel):
    """Normalized table for one betting-type category.

    Attributes:
        title: Category name
        headers: Column headers (authoritative after the full pass)
        rows: Price rows; cells are floats, formatted strings, or PLACEHOLDER
        row_labels: Bookmaker name for each row, parallel to `rows`
    """

    title: str
    headers: list[str] = Field(default_factory=list)
    rows: list[list[Cell]] = Field(default_factory=list)
    row_labels: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.headers or not self.rows
