"""Shared test fixtures for tripbook."""

import sys
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from tripbook.config import Config  # noqa: E402
from tripbook.db.store import TripStore  # noqa: E402
from tripbook.models.forms import TripForm  # noqa: E402


def make_config(database_url: str = "sqlite://") -> Config:
    return Config(
        database_url=database_url,
        default_currency="USD",
        default_color="#4A90E2",
        first_weekday=1,
        environment="test",
    )


@pytest.fixture
def store():
    """Provide a connected store on a fresh in-memory database."""
    with TripStore(make_config()) as trip_store:
        trip_store.create_schema()
        yield trip_store


@pytest.fixture
def trip(store):
    """A ten-day trip in March 2026."""
    return store.create_trip(
        TripForm(
            title="Japan Adventure",
            destination="Tokyo, Japan",
            start_date=date(2026, 3, 10),
            end_date=date(2026, 3, 19),
            budget=2500,
            currency="USD",
            color_hex="#4A90E2",
        )
    )


@pytest.fixture
def db_url(tmp_path):
    """SQLite database file URL for migration tests."""
    return f"sqlite:///{tmp_path / 'tripbook.db'}"
