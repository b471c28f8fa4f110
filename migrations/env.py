"""Alembic environment configuration."""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def get_url() -> str:
    """Get database URL from environment variables.

    Alembic will use ALEMBIC_DATABASE_URL if set, otherwise APP_DATABASE_URL_SYNC.
    If neither is set, raises RuntimeError with a clear message.
    """
    alembic_url = os.environ.get("ALEMBIC_DATABASE_URL")
    if alembic_url:
        return alembic_url

    sync_url = os.environ.get("APP_DATABASE_URL_SYNC")
    if sync_url:
        return sync_url

    raise RuntimeError(
        "No database URL found. Set either ALEMBIC_DATABASE_URL or APP_DATABASE_URL_SYNC "
        "environment variable."
    )


def get_target_metadata():
    # Import here to avoid import-time database connections
    from roadbook.storage import models  # noqa: F401 (ensure mappers are imported)
    from roadbook.storage.base import Base

    return Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode, emitting SQL to the script output."""
    url = get_url()
    context.configure(
        url=url,
        target_metadata=get_target_metadata(),
        literal_binds=True,
        render_as_batch=url.startswith("sqlite"),
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode against a live connection."""
    url = get_url()
    engine = create_engine(url, future=True, pool_pre_ping=True)

    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=get_target_metadata(),
            compare_type=True,
            # SQLite cannot ALTER most columns in place
            render_as_batch=url.startswith("sqlite"),
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
