"""Shared pytest fixtures for odds board tests."""

import json

import pytest

from odds_board.data.loader import parse_matches
from odds_board.monitoring import configure_logging


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")


@pytest.fixture
def raw_dataset():
    """Dataset document shaped like the bundled feed.

    Contains:
        10238: fully quoted match (moneyline, handicap, over/under, correct
               score, a suspended Odd/Even market and an unquoted market)
        99:    numeric id, single odds type given as an object
        10239: missing away team name (not displayable)
        (no id): dropped at load time
    """
    return {
        "data": [
            {
                "matches": {
                    "match": [
                        {
                            "id": "10238",
                            "date": "Apr 12",
                            "localteam": {"name": "New York Yankees"},
                            "awayteam": {"name": "Boston Red Sox"},
                            "odds": {
                                "type": [
                                    {
                                        "value": "Home/Away",
                                        "stop": "False",
                                        "bookmaker": [
                                            {
                                                "name": "bet365",
                                                "odd": [
                                                    {"name": "Home", "value": "1.72"},
                                                    {"name": "Away", "value": "2.10"},
                                                ],
                                            },
                                            {
                                                "name": "Pinnacle",
                                                "odd": [
                                                    {"name": "Home", "value": "1.75"},
                                                    {"name": "Away", "value": "2.14"},
                                                ],
                                            },
                                        ],
                                    },
                                    {
                                        "value": "Handicap",
                                        "stop": "False",
                                        "bookmaker": {
                                            "name": "bet365",
                                            "handicap": {
                                                "name": "-1.5",
                                                "odd": [
                                                    {"name": "Home", "value": "1.90"},
                                                    {"name": "Away", "value": "1.95"},
                                                ],
                                            },
                                        },
                                    },
                                    {
                                        "value": "Over/Under",
                                        "stop": "False",
                                        "bookmaker": {
                                            "name": "bet365",
                                            "total": [
                                                {
                                                    "name": "9.5",
                                                    "odd": [
                                                        {"name": "Over", "value": "2.05"},
                                                        {"name": "Under", "value": "1.80"},
                                                    ],
                                                },
                                                {
                                                    "name": "8.5",
                                                    "odd": [
                                                        {"name": "Over", "value": "1.83"},
                                                        {"name": "Under", "value": "2.00"},
                                                    ],
                                                },
                                            ],
                                        },
                                    },
                                    {
                                        "value": "Correct Score",
                                        "stop": "False",
                                        "bookmaker": {
                                            "name": "bet365",
                                            "odd": [
                                                {"name": "2:1", "value": "9.00", "us": "+120"},
                                                {"name": "1:0", "value": "7.50", "us": "-150"},
                                            ],
                                        },
                                    },
                                    {
                                        "value": "Odd/Even",
                                        "stop": "True",
                                        "bookmaker": {
                                            "name": "bet365",
                                            "odd": [
                                                {"name": "Odd", "value": "1.90"},
                                                {"name": "Even", "value": "1.90"},
                                            ],
                                        },
                                    },
                                    {
                                        "value": "Total Corners",
                                        "stop": "False",
                                        "bookmaker": {"name": "bet365"},
                                    },
                                ]
                            },
                        },
                        {
                            "id": 99,
                            "date": "Apr 12",
                            "localteam": {"name": "Chicago Cubs"},
                            "awayteam": {"name": "St. Louis Cardinals"},
                            "odds": {
                                "type": {
                                    "value": "3Way Result",
                                    "bookmaker": [
                                        {
                                            "name": "bet365",
                                            "odd": [
                                                {"name": "Home", "value": "2.20"},
                                                {"name": "Draw", "value": "9.00"},
                                                {"name": "Away", "value": "2.30"},
                                            ],
                                        }
                                    ],
                                }
                            },
                        },
                    ]
                }
            },
            {
                "matches": {
                    "match": {
                        "id": "10239",
                        "date": "Apr 13",
                        "localteam": {"name": "Seattle Mariners"},
                        "awayteam": {"id": "3002"},
                        "odds": {
                            "type": {
                                "value": "Home/Away",
                                "bookmaker": {
                                    "name": "bet365",
                                    "odd": [
                                        {"name": "Home", "value": "1.95"},
                                        {"name": "Away", "value": "1.85"},
                                    ],
                                },
                            }
                        },
                    }
                }
            },
            {"matches": {"match": {"date": "Apr 14", "localteam": {"name": "No Id"}}}},
        ]
    }


@pytest.fixture
def matches(raw_dataset):
    """Matches parsed from raw_dataset."""
    return parse_matches(raw_dataset)


@pytest.fixture
def dataset_file(tmp_path, raw_dataset):
    """raw_dataset written to a temporary JSON file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(raw_dataset), encoding="utf-8")
    return path
