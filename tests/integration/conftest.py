"""Integration test configuration: SQL repositories on in-memory SQLite."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from roadbook.factory import create_app
from roadbook.storage import (
    SqlKeyValueStore,
    SqlSessionPrefs,
    SqlSettingsRepository,
    SqlTripRepository,
    create_engine_from_settings,
    get_sessionmaker,
    init_models,
)


@pytest_asyncio.fixture
async def session_maker(test_settings):
    """Fresh in-memory database with all tables created."""
    engine = create_engine_from_settings(test_settings)
    await init_models(engine)
    try:
        yield get_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest.fixture
def sql_trip_repo(session_maker) -> SqlTripRepository:
    return SqlTripRepository(session_maker)


@pytest.fixture
def preference_store(session_maker) -> SqlKeyValueStore:
    return SqlKeyValueStore(session_maker)


@pytest.fixture
def sql_session_prefs(preference_store) -> SqlSessionPrefs:
    return SqlSessionPrefs(preference_store)


@pytest.fixture
def sql_settings_repo(preference_store) -> SqlSettingsRepository:
    return SqlSettingsRepository(preference_store)


@pytest.fixture
def api_client(test_settings, clock):
    """Client for the full application, lifespan included."""
    app = create_app(test_settings)
    app.state.clock = clock
    with TestClient(app) as client:
        yield client
