"""Trip lifecycle domain: entities, rules and pure derivations."""

from .driving_state import DrivingState, derive_driving_state, find_arrived_trip
from .errors import (
    KmInconsistencyError,
    RoadbookError,
    StorageError,
    TripNotFoundError,
    TripStateError,
    ValidationFailedError,
)
from .grouping import TripGroup, TripStats, compute_trip_stats, group_trips
from .result import Err, Ok, Result
from .trip import Trip, TripStatus
from .user_settings import DEFAULT_USER_SETTINGS, ThemeMode, UserSettings
from .validation import Invalid, TripValidator, TripValidatorIface, Valid, ValidationResult

__all__ = [
    "DrivingState",
    "derive_driving_state",
    "find_arrived_trip",
    "RoadbookError",
    "TripNotFoundError",
    "ValidationFailedError",
    "KmInconsistencyError",
    "TripStateError",
    "StorageError",
    "TripGroup",
    "TripStats",
    "group_trips",
    "compute_trip_stats",
    "Ok",
    "Err",
    "Result",
    "Trip",
    "TripStatus",
    "ThemeMode",
    "UserSettings",
    "DEFAULT_USER_SETTINGS",
    "TripValidator",
    "TripValidatorIface",
    "ValidationResult",
    "Valid",
    "Invalid",
]
