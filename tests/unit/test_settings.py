"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from roadbook.core.settings import Settings, get_settings

ENV_VARS = [
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "APP_DATABASE_URL",
    "APP_DATABASE_URL_SYNC",
    "CREATE_TABLES_ON_STARTUP",
    "METRICS_ENABLED",
]


@pytest.mark.unit
def test_settings_defaults(monkeypatch):
    """Test settings with default values."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)

    settings = Settings()
    assert settings.app_env == "local"
    assert settings.log_level == "INFO"
    assert settings.log_json is True
    assert settings.app_database_url == "sqlite+aiosqlite:///./roadbook.db"
    assert settings.app_database_url_sync is None
    assert settings.create_tables_on_startup is True
    assert settings.metrics_enabled is True
    assert settings.is_production is False


@pytest.mark.unit
def test_settings_from_env(monkeypatch):
    """Test settings from environment variables."""
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("METRICS_ENABLED", "false")
    monkeypatch.setenv("APP_DATABASE_URL_SYNC", "sqlite:///./roadbook.db")

    settings = Settings.from_env()
    assert settings.app_env == "prod"
    assert settings.is_production is True
    assert settings.log_level == "debug"
    assert settings.metrics_enabled is False
    assert settings.app_database_url_sync == "sqlite:///./roadbook.db"


@pytest.mark.unit
def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "CHATTY")
    with pytest.raises(ValidationError, match="Unknown LOG_LEVEL"):
        Settings()


@pytest.mark.unit
def test_unknown_app_env_rejected(monkeypatch):
    monkeypatch.setenv("APP_ENV", "qa")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.unit
def test_get_settings_cache():
    """Test that get_settings uses caching."""
    get_settings.cache_clear()

    settings1 = get_settings()
    settings2 = get_settings()

    assert settings1 is settings2
