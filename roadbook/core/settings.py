"""Application settings and configuration."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _is_testing() -> bool:
    """Check if we're running in a test environment."""
    import sys

    return "pytest" in sys.modules


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env" if not _is_testing() else None,  # Don't load .env in tests
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: Literal["local", "staging", "prod", "test"] = Field(
        default="local", description="Application environment"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON lines")

    # Database URLs
    app_database_url: str = Field(
        default="sqlite+aiosqlite:///./roadbook.db",
        description="Async database connection URL",
    )
    app_database_url_sync: str | None = Field(
        default=None, description="Sync database connection URL (Alembic)"
    )
    create_tables_on_startup: bool = Field(
        default=True, description="Create missing tables when the app starts"
    )

    # Metrics
    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics")

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Validate log level name."""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level}")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.app_env == "prod"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
