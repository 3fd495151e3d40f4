"""Odds normalizer: reshape betting-type records into display tables.

Each category is dispatched on its market kind:

- Handicap / Over/Under: fixed two-way headers, one row per bookmaker line
  value, lines sorted numerically, cells like "1.9 (-1.5)". A bookmaker with
  no lines falls back to its direct odds.
- Correct Score: fixed headers Name / US / Value, rows sorted by combined
  score then by the first score component.
- Everything else: headers are the sorted union of outcome names, one row per
  bookmaker.

Tables are rebuilt from the source records on every call and the records are
never modified. Rows holding only placeholders are dropped.
"""

from collections.abc import Callable, Sequence

from odds_board.data.models import (
    PLACEHOLDER,
    BookmakerQuote,
    Cell,
    Match,
    OddEntry,
    OddsTable,
    OddsType,
)
from odds_board.normalizer.markets import (
    CORRECT_SCORE_HEADERS,
    LINE_SIDES,
    MarketKind,
    classify_market,
)
from odds_board.normalizer.prices import (
    format_price,
    parse_line,
    parse_price,
    parse_score,
    parse_us_price,
)

TableBuilder = Callable[[str, MarketKind, Sequence[BookmakerQuote]], OddsTable]
LineKey = tuple[int, float, str]


def _has_price(cells: Sequence[Cell]) -> bool:
    return any(cell != PLACEHOLDER for cell in cells)


def _line_key(label: str | None) -> LineKey:
    """Grouping and sort key of a line: numeric value first, unparseable labels last."""
    value = parse_line(label)
    if value is None:
        return (1, 0.0, label or "")
    return (0, value, "")


def _bookmaker_lines(
    bookmaker: BookmakerQuote, kind: MarketKind
) -> list[tuple[str | None, list[OddEntry]]]:
    """A bookmaker's entries grouped by line value, in numeric line order.

    Groups whose labels parse to the same value ("-1.5", "-1.50") are merged
    under the first label seen. A bookmaker quoting no lines but direct odds
    yields those odds as a single unlabeled line.
    """
    groups = bookmaker.handicap if kind is MarketKind.HANDICAP else bookmaker.total
    if not groups:
        return [(None, list(bookmaker.odd))] if bookmaker.odd else []

    merged: dict[LineKey, tuple[str | None, list[OddEntry]]] = {}
    for group in groups:
        _, entries = merged.setdefault(_line_key(group.name), (group.name, []))
        entries.extend(group.odd)
    return [merged[key] for key in sorted(merged)]


def _line_cell(label: str | None, entries: Sequence[OddEntry], side: str) -> Cell:
    """First valid price on this line whose outcome name contains `side`."""
    for odd in entries:
        if odd.name is None or side not in odd.name.lower():
            continue
        price = parse_price(odd.value)
        if price is None:
            continue
        if label is None:
            return format_price(price)
        return f"{format_price(price)} ({label})"
    return PLACEHOLDER


def _line_table(
    category: str, kind: MarketKind, bookmakers: Sequence[BookmakerQuote]
) -> OddsTable:
    (first_header, first_side), (second_header, second_side) = LINE_SIDES[kind]
    rows: list[list[Cell]] = []
    labels: list[str] = []

    for bookmaker in bookmakers:
        for label, entries in _bookmaker_lines(bookmaker, kind):
            cells = [
                _line_cell(label, entries, first_side),
                _line_cell(label, entries, second_side),
            ]
            if _has_price(cells):
                rows.append(cells)
                labels.append(bookmaker.name or "")

    return OddsTable(
        title=category,
        headers=[first_header, second_header],
        rows=rows,
        row_labels=labels,
    )


def _score_sort_key(name: str | None) -> tuple[int, int, int]:
    score = parse_score(name)
    if score is None:
        return (1, 0, 0)
    home, away = score
    return (0, home + away, home)


def _correct_score_table(
    category: str, kind: MarketKind, bookmakers: Sequence[BookmakerQuote]
) -> OddsTable:
    entries: list[tuple[tuple[int, int, int], list[Cell], str]] = []

    for bookmaker in bookmakers:
        for odd in bookmaker.odd:
            us = parse_us_price(odd.us)
            price = parse_price(odd.value)
            if us is None and price is None:
                continue
            row: list[Cell] = [
                odd.name or PLACEHOLDER,
                us if us is not None else PLACEHOLDER,
                price if price is not None else PLACEHOLDER,
            ]
            entries.append((_score_sort_key(odd.name), row, bookmaker.name or ""))

    # sort is stable: equal scores keep bookmaker/feed order
    entries.sort(key=lambda entry: entry[0])

    return OddsTable(
        title=category,
        headers=list(CORRECT_SCORE_HEADERS),
        rows=[row for _, row, _ in entries],
        row_labels=[label for _, _, label in entries],
    )


def _generic_table(
    category: str, kind: MarketKind, bookmakers: Sequence[BookmakerQuote]
) -> OddsTable:
    """Union-of-outcomes table.

    Headers accumulate bookmaker by bookmaker and each row is aligned to the
    headers known when it was built, so an early row can be shorter than the
    final header list. Only the returned headers are authoritative.
    """
    seen: set[str] = set()
    rows: list[list[Cell]] = []
    labels: list[str] = []

    for bookmaker in bookmakers:
        prices: dict[str, float | None] = {}
        for odd in bookmaker.odd:
            if odd.name is None:
                continue
            seen.add(odd.name)
            # first entry with a given name wins
            prices.setdefault(odd.name, parse_price(odd.value))

        row: list[Cell] = []
        for name in sorted(seen):
            price = prices.get(name)
            row.append(price if price is not None else PLACEHOLDER)

        if _has_price(row):
            rows.append(row)
            labels.append(bookmaker.name or "")

    return OddsTable(title=category, headers=sorted(seen), rows=rows, row_labels=labels)


_BUILDERS: dict[MarketKind, TableBuilder] = {
    MarketKind.HANDICAP: _line_table,
    MarketKind.OVER_UNDER: _line_table,
    MarketKind.CORRECT_SCORE: _correct_score_table,
    MarketKind.GENERIC: _generic_table,
}


def normalize_category(category: str, odds_types: Sequence[OddsType]) -> OddsTable:
    """Build the table for one betting-type category of a match.

    Args:
        category: Category name, matched exactly against OddsType.value
        odds_types: All betting-type records of the match

    Returns:
        OddsTable for the first record named `category`; an empty table when
        no such record exists or it has no bookmakers

    Examples:
        >>> from odds_board.data.models import OddsType
        >>> record = OddsType.model_validate({
        ...     "value": "Handicap",
        ...     "bookmaker": {"name": "A", "handicap": {"name": "-1.5", "odd": [
        ...         {"name": "Home", "value": "1.90"},
        ...         {"name": "Away", "value": "1.95"},
        ...     ]}},
        ... })
        >>> table = normalize_category("Handicap", [record])
        >>> table.headers, table.rows
        (['Home', 'Away'], [['1.9 (-1.5)', '1.95 (-1.5)']])
    """
    odds_type = next((t for t in odds_types if t.value == category), None)
    if odds_type is None or not odds_type.bookmaker:
        return OddsTable(title=category)

    kind = classify_market(category)
    return _BUILDERS[kind](category, kind, odds_type.bookmaker)


def build_match_tables(match: Match, include_inactive: bool = False) -> list[OddsTable]:
    """Normalize every betting type of a match, in feed order.

    Records without a category name are skipped, as are suspended markets
    unless `include_inactive` is set. Empty tables are kept; renderers skip
    them via OddsTable.is_empty.
    """
    odds_types = match.odds_types
    tables = []
    for odds_type in odds_types:
        if odds_type.value is None:
            continue
        if not include_inactive and not odds_type.is_active:
            continue
        tables.append(normalize_category(odds_type.value, odds_types))
    return tables
