from datetime import datetime, timezone

import pytest

from fixture_engine.config import get_settings
from fixture_engine.models import VenueSlot

START_AT = datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(name="start_at")
def start_at_fixture():
    return START_AT


@pytest.fixture(name="two_venues")
def two_venues_fixture():
    return [VenueSlot("venue-1"), VenueSlot("venue-2")]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; tests that patch env need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
