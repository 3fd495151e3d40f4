"""Odds normalizer: market classification, price parsing, table building."""

from odds_board.normalizer.markets import MarketKind, classify_market
from odds_board.normalizer.tables import build_match_tables, normalize_category

__all__ = [
    "MarketKind",
    "build_match_tables",
    "classify_market",
    "normalize_category",
]
