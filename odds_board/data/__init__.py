"""Dataset models and loading."""

from odds_board.data.loader import DatasetError, load_matches, parse_matches
from odds_board.data.models import (
    PLACEHOLDER,
    BookmakerQuote,
    LineGroup,
    Match,
    OddEntry,
    OddsTable,
    OddsType,
)

__all__ = [
    "PLACEHOLDER",
    "BookmakerQuote",
    "DatasetError",
    "LineGroup",
    "Match",
    "OddEntry",
    "OddsTable",
    "OddsType",
    "load_matches",
    "parse_matches",
]
