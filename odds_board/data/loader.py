"""Load the bundled odds dataset.

The dataset is a JSON document whose root is either ``{"data": [...]}`` or a
bare list of outer records. Each outer record holds ``matches.match``, which
is a single match object or a list of them. Loading flattens all of these
into one list of Match models, in file order.
"""

import json
from pathlib import Path
from typing import Any

from odds_board.data.models import Match, as_list, as_text
from odds_board.monitoring import get_logger

log = get_logger(__name__)


class DatasetError(Exception):
    """Raised when the dataset file cannot be read or its root is malformed."""


def _outer_records(document: Any) -> list[dict]:
    if isinstance(document, dict):
        if "data" not in document:
            raise DatasetError("Dataset root object has no 'data' key")
        document = document["data"]
    if not isinstance(document, list):
        raise DatasetError(
            f"Dataset records must be a list (got {type(document).__name__})"
        )
    return [record for record in document if isinstance(record, dict)]


def parse_matches(document: Any) -> list[Match]:
    """Flatten a decoded dataset document into Match models.

    Raw matches without an identifier are dropped with a warning. Every
    other match is kept; its malformed fields are coerced by the models.

    Args:
        document: Decoded JSON root

    Returns:
        Matches in document order

    Raises:
        DatasetError: If the root is not a list of records or a {"data": [...]} object
    """
    matches: list[Match] = []
    for record in _outer_records(document):
        container = record.get("matches")
        raw_matches = as_list(container.get("match")) if isinstance(container, dict) else []
        for raw in raw_matches:
            if as_text(raw.get("id")) is None:
                log.warning("match_skipped", reason="missing_id")
                continue
            matches.append(Match.model_validate(raw))
    return matches


def load_matches(path: str | Path) -> list[Match]:
    """Read the dataset file once and return its matches.

    Args:
        path: Location of the JSON dataset

    Returns:
        Matches in file order

    Raises:
        DatasetError: If the file is missing or unreadable, not valid UTF-8 JSON,
            or wrongly shaped
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(f"Dataset not found: {path}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetError(f"Dataset is not valid JSON: {path} ({e})") from e
    except OSError as e:
        raise DatasetError(f"Dataset cannot be read: {path} ({e.strerror or e})") from e

    matches = parse_matches(document)
    log.info("dataset_loaded", path=str(path), match_count=len(matches))
    return matches
