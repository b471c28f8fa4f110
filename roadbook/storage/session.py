"""Database engine and session management."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from roadbook.core.settings import Settings, get_settings

from .base import Base


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """Create async database engine from settings."""
    settings = settings or get_settings()
    url = settings.app_database_url
    if not url:
        raise RuntimeError("APP_DATABASE_URL not set")

    kwargs: dict = {"future": True}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_async_engine(url, **kwargs)


def get_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session maker."""
    return async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


async def init_models(engine: AsyncEngine) -> None:
    """Create missing tables."""
    from . import models  # noqa: F401 (ensure mappers are imported)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
