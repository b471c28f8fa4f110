"""Database storage layer."""

from .base import Base
from .interfaces import SessionPrefsIface, SettingsRepoIface, TripRepoIface
from .live import ChangeFeed
from .models import PreferenceRecord, TripRecord
from .repositories import (
    SqlKeyValueStore,
    SqlSessionPrefs,
    SqlSettingsRepository,
    SqlTripRepository,
)
from .session import create_engine_from_settings, get_sessionmaker, init_models

__all__ = [
    "Base",
    "ChangeFeed",
    "TripRecord",
    "PreferenceRecord",
    "TripRepoIface",
    "SessionPrefsIface",
    "SettingsRepoIface",
    "SqlTripRepository",
    "SqlKeyValueStore",
    "SqlSessionPrefs",
    "SqlSettingsRepository",
    "create_engine_from_settings",
    "get_sessionmaker",
    "init_models",
]
