"""Application factory for creating FastAPI instances."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from roadbook import __version__
from roadbook.core.clock import system_clock
from roadbook.core.logging import get_logger, install_middlewares, setup_logging
from roadbook.core.settings import Settings, get_settings
from roadbook.storage import (
    SqlKeyValueStore,
    SqlSessionPrefs,
    SqlSettingsRepository,
    SqlTripRepository,
    create_engine_from_settings,
    get_sessionmaker,
    init_models,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    settings: Settings = app.state.settings
    logger.info("Starting roadbook", app_env=settings.app_env)

    engine = create_engine_from_settings(settings)
    if settings.create_tables_on_startup:
        await init_models(engine)

    session_maker = get_sessionmaker(engine)
    preferences = SqlKeyValueStore(session_maker)

    app.state.engine = engine
    app.state.trip_repo = SqlTripRepository(session_maker)
    app.state.session_prefs = SqlSessionPrefs(preferences)
    app.state.settings_repo = SqlSettingsRepository(preferences)

    logger.info("Roadbook ready")

    yield

    logger.info("Shutting down roadbook")
    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory with settings injection.

    Args:
        settings: Optional settings instance. If None, loads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)

    app = FastAPI(
        title="Roadbook",
        version=__version__,
        description="Driving logbook for accompanied driving sessions",
        lifespan=lifespan,
    )

    # Store settings in app state for dependency injection
    app.state.settings = settings
    app.state.clock = system_clock

    install_middlewares(app)
    setup_routes(app)

    return app


def setup_routes(app: FastAPI) -> None:
    """Configure application routes."""
    from roadbook.api import api_router, ops_router

    app.include_router(api_router)
    app.include_router(ops_router)
