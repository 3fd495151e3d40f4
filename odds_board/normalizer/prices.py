"""Price, line and score parsing for feed values.

Feed values are strings (or None). Every parser returns None for anything it
cannot use, so callers decide how an unusable value is displayed.
"""

import math
import re

_SCORE_RE = re.compile(r"^\s*(\d+)\s*[:\-]\s*(\d+)\s*$")


def _to_float(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_price(value: str | None) -> float | None:
    """Parse a decimal price; zero, negative or non-numeric values give None.

    Examples:
        >>> parse_price("1.90")
        1.9
        >>> parse_price("0") is None
        True
        >>> parse_price("n/a") is None
        True
    """
    number = _to_float(value)
    if number is None or number <= 0:
        return None
    return number


def parse_us_price(value: str | None) -> str | None:
    """Validate a moneyline (American) price, keeping the feed's own text.

    Any non-zero number is accepted; zero and non-numeric values give None.

    Examples:
        >>> parse_us_price("-150")
        '-150'
        >>> parse_us_price("+120")
        '+120'
        >>> parse_us_price("0") is None
        True
    """
    number = _to_float(value)
    if number is None or number == 0:
        return None
    return value


def format_price(price: float) -> str:
    """Shortest display form of a decimal price.

    Examples:
        >>> format_price(1.90)
        '1.9'
        >>> format_price(2.0)
        '2'
        >>> format_price(1.85)
        '1.85'
    """
    if price.is_integer():
        return str(int(price))
    return repr(price)


def parse_line(label: str | None) -> float | None:
    """Numeric value of a handicap or total line label.

    Quarter lines written as two comma-separated values use their mean.

    Examples:
        >>> parse_line("-1.5")
        -1.5
        >>> parse_line("+2")
        2.0
        >>> parse_line("0, -0.5")
        -0.25
        >>> parse_line("pk") is None
        True
    """
    if label is None:
        return None
    parts = [_to_float(part) for part in label.split(",")]
    if not parts or any(part is None for part in parts):
        return None
    return sum(parts) / len(parts)


def parse_score(label: str | None) -> tuple[int, int] | None:
    """Split a correct-score label ("2:1" or "2-1") into its two components.

    Examples:
        >>> parse_score("2:1")
        (2, 1)
        >>> parse_score("0-0")
        (0, 0)
        >>> parse_score("Any Other") is None
        True
    """
    if label is None:
        return None
    match = _SCORE_RE.match(label)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))
