"""Pydantic v2 response models for the API."""

from pydantic import BaseModel, Field

from odds_board.board import MatchView
from odds_board.data.models import Cell


# --- Health ---

class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    timestamp: str
    match_count: int


# --- Tables ---

class OddsTableResponse(BaseModel):
    title: str
    headers: list[str]
    rows: list[list[Cell]]
    row_labels: list[str] = Field(default_factory=list)


class MatchViewResponse(BaseModel):
    match_id: str
    home: str
    away: str
    date: str
    tables: list[OddsTableResponse] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: MatchView) -> "MatchViewResponse":
        return cls(
            match_id=view.match_id,
            home=view.home,
            away=view.away,
            date=view.date,
            tables=[OddsTableResponse(**table.model_dump()) for table in view.tables],
        )


class MatchListResponse(BaseModel):
    matches: list[MatchViewResponse]
    total: int
    query: str = ""


# --- Search ---

class SuggestionResponse(BaseModel):
    match_id: str
    label: str
