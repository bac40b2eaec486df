"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.storm_dol.models import EventType, GeoPoint, PointGeometry, WeatherEvent  # noqa: E402

# Statute miles per degree of latitude for the engine's earth radius
MILES_PER_DEGREE = 3958.7613 * 3.141592653589793 / 180


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration environment variables from leaking into tests."""
    for name in ("CONFIG_FILE", "DOL_LOOKBACK_DAYS", "DOL_UNRESOLVED_LOCATION", "LOG_LEVEL", "LOG_FILE", "LOG_TO_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_data(fixtures_dir):
    """Load sample property and weather events from fixtures."""
    data_file = fixtures_dir / "sample_events.json"
    with open(data_file) as f:
        return json.load(f)


@pytest.fixture
def property_location():
    """Insured property used across scoring tests."""
    return GeoPoint(lat=39.0, lon=-95.0)


@pytest.fixture
def make_event(property_location):
    """Factory for point events placed a given number of miles north of the property."""
    counter = {"n": 0}

    def _make(
        event_type=EventType.HAIL_REPORT,
        magnitude=None,
        time_utc="2024-06-01T10:00:00Z",
        miles_north=0.0,
        event_id=None,
        source="test",
    ):
        counter["n"] += 1
        point = GeoPoint(
            lat=property_location.lat + miles_north / MILES_PER_DEGREE,
            lon=property_location.lon,
        )
        return WeatherEvent(
            id=event_id or f"e{counter['n']}",
            type=event_type,
            magnitude=magnitude,
            time_utc=time_utc,
            geometry=PointGeometry(point=point),
            source=source,
        )

    return _make


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
