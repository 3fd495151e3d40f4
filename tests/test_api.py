"""Integration tests for the FastAPI app: JSON endpoints and the HTML page."""

import pytest
from fastapi.testclient import TestClient

from odds_board.data.loader import DatasetError


# --- Fixtures ---

@pytest.fixture
def test_settings(monkeypatch, dataset_file):
    """Point settings at the temporary dataset before creating the app."""
    monkeypatch.setenv("DATASET_PATH", str(dataset_file))
    monkeypatch.setenv("ENVIRONMENT", "test")

    from odds_board.config import get_settings
    get_settings.cache_clear()

    yield get_settings()

    get_settings.cache_clear()


@pytest.fixture
def client(test_settings):
    """Test client with the lifespan run (dataset loaded)."""
    from odds_board.api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


# --- Health ---

def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["match_count"] == 3
    assert "version" in data


# --- Matches ---

def test_list_matches_skips_incomplete(client):
    response = client.get("/api/matches")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert [m["match_id"] for m in data["matches"]] == ["10238", "99"]


def test_list_matches_query(client):
    data = client.get("/api/matches", params={"q": "1023"}).json()

    assert data["query"] == "1023"
    assert [m["match_id"] for m in data["matches"]] == ["10238"]


def test_get_match_tables(client):
    response = client.get("/api/matches/10238")

    assert response.status_code == 200
    data = response.json()
    assert data["home"] == "New York Yankees"
    tables = {t["title"]: t for t in data["tables"]}
    assert list(tables) == ["Home/Away", "Handicap", "Over/Under", "Correct Score"]
    assert tables["Handicap"]["headers"] == ["Home", "Away"]
    assert tables["Handicap"]["rows"] == [["1.9 (-1.5)", "1.95 (-1.5)"]]
    assert tables["Correct Score"]["rows"] == [["1:0", "-150", 7.5], ["2:1", "+120", 9.0]]
    assert tables["Home/Away"]["row_labels"] == ["bet365", "Pinnacle"]


def test_get_unknown_match(client):
    response = client.get("/api/matches/nope")
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_get_incomplete_match(client):
    """10239 exists but has no away team name."""
    response = client.get("/api/matches/10239")
    assert response.status_code == 404


def test_inactive_markets_setting(monkeypatch, test_settings):
    monkeypatch.setenv("INCLUDE_INACTIVE_MARKETS", "true")
    from odds_board.api.app import create_app
    from odds_board.config import get_settings
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        titles = [t["title"] for t in client.get("/api/matches/10238").json()["tables"]]

    assert "Odd/Even" in titles


# --- Suggestions ---

def test_suggestions(client):
    response = client.get("/api/suggestions", params={"q": "10"})

    assert response.status_code == 200
    assert response.json() == [
        {"match_id": "10238", "label": "Match ID: 10238 - New York Yankees vs Boston Red Sox"},
        {"match_id": "10239", "label": "Match ID: 10239"},
    ]


def test_suggestions_require_query(client):
    assert client.get("/api/suggestions").status_code == 422


# --- Page ---

def test_page_renders_board(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert "Search by Match ID..." in html
    assert "New York Yankees" in html
    assert "Chicago Cubs" in html
    assert "Seattle Mariners" not in html
    assert '<div class="suggestions">' not in html


def test_page_typed_query_lists_suggestions(client):
    html = client.get("/", params={"q": "1023"}).text

    assert '<div class="suggestions">' in html
    assert "Match ID: 10238 - New York Yankees vs Boston Red Sox" in html
    assert "Chicago Cubs" not in html


def test_page_picked_suggestion_hides_list(client):
    html = client.get("/", params={"q": "10238", "picked": 1}).text

    assert '<div class="suggestions">' not in html
    assert "New York Yankees" in html


def test_page_no_results(client):
    html = client.get("/", params={"q": "zzz"}).text
    assert 'No matches found for ID "zzz"' in html


def test_security_headers(client):
    response = client.get("/")
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "Content-Security-Policy" in response.headers
    assert "X-Request-ID" in response.headers


# --- Startup ---

def test_missing_dataset_fails_startup(monkeypatch, tmp_path):
    monkeypatch.setenv("DATASET_PATH", str(tmp_path / "missing.json"))
    from odds_board.api.app import create_app
    from odds_board.config import get_settings
    get_settings.cache_clear()

    with pytest.raises(DatasetError):
        with TestClient(create_app()):
            pass

    get_settings.cache_clear()
