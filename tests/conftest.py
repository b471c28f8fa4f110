"""Test configuration and fixtures for roadbook tests."""

import os
from datetime import date

import pytest

# Set minimal env before any settings are loaded
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("APP_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from roadbook.core.clock import FixedClock  # noqa: E402
from roadbook.core.settings import Settings, get_settings  # noqa: E402
from roadbook.services import TripUseCases, UserSettingsService  # noqa: E402
from tests.fakes.repositories import (  # noqa: E402
    SessionPrefsFake,
    SettingsRepoFake,
    TripRepoFake,
)

# 2023-11-14T22:13:20Z
NOW_MS = 1_700_000_000_000


def reset_settings_cache() -> None:
    """Clear the cached settings so environment changes are picked up."""
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def test_settings() -> Settings:
    """In-memory database settings."""
    return Settings(
        app_env="test",
        app_database_url="sqlite+aiosqlite:///:memory:",
        log_json=False,
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(now_ms=NOW_MS, today=date(2024, 5, 1))


@pytest.fixture
def trip_repo() -> TripRepoFake:
    return TripRepoFake()


@pytest.fixture
def session_prefs() -> SessionPrefsFake:
    return SessionPrefsFake()


@pytest.fixture
def settings_repo() -> SettingsRepoFake:
    return SettingsRepoFake()


@pytest.fixture
def use_cases(trip_repo, session_prefs, clock) -> TripUseCases:
    """Trip use cases wired to in-memory fakes and a fixed clock."""
    return TripUseCases.create(trip_repo, session_prefs, clock=clock)


@pytest.fixture
def settings_service(settings_repo) -> UserSettingsService:
    return UserSettingsService(settings_repo)
