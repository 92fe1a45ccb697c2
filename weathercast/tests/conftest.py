"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest

from weathercast.storage.city_repo import CityStore
from weathercast.storage.database import connect, run_migrations

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    """A migrated temporary SQLite database."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()


@pytest.fixture
def store(db: sqlite3.Connection) -> CityStore:
    return CityStore(db)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def berlin_geocoding() -> dict:
    with open(FIXTURE_DIR / "geocoding_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def berlin_forecast_raw() -> str:
    return (FIXTURE_DIR / "forecast_berlin.json").read_text()


@pytest.fixture(autouse=True)
def _no_db_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WEATHERCAST_DB_PATH", raising=False)
