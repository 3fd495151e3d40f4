"""Market-kind classification for betting-type categories.

Categories are identified only by their display name, so the kind is chosen
by case-insensitive substring match. Order matters: the first keyword found
wins.
"""

from enum import Enum


class MarketKind(str, Enum):
    HANDICAP = "handicap"
    OVER_UNDER = "over_under"
    CORRECT_SCORE = "correct_score"
    GENERIC = "generic"


# (keyword, kind) pairs, checked in order
MARKET_KEYWORDS: tuple[tuple[str, MarketKind], ...] = (
    ("handicap", MarketKind.HANDICAP),
    ("over/under", MarketKind.OVER_UNDER),
    ("correct score", MarketKind.CORRECT_SCORE),
)

# Fixed two-way headers and the outcome-name keyword selecting each side
LINE_SIDES: dict[MarketKind, tuple[tuple[str, str], tuple[str, str]]] = {
    MarketKind.HANDICAP: (("Home", "home"), ("Away", "away")),
    MarketKind.OVER_UNDER: (("Over", "over"), ("Under", "under")),
}

CORRECT_SCORE_HEADERS = ["Name", "US", "Value"]


def classify_market(category: str) -> MarketKind:
    """Pick the market kind for a category name.

    Examples:
        >>> classify_market("Asian Handicap")
        <MarketKind.HANDICAP: 'handicap'>
        >>> classify_market("Over/Under 1st Half")
        <MarketKind.OVER_UNDER: 'over_under'>
        >>> classify_market("3Way Result")
        <MarketKind.GENERIC: 'generic'>
    """
    lowered = category.lower()
    for keyword, kind in MARKET_KEYWORDS:
        if keyword in lowered:
            return kind
    return MarketKind.GENERIC
