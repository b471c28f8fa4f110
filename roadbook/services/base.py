"""Shared plumbing for trip use cases."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from roadbook.core.clock import Clock, system_clock
from roadbook.core.logging import get_logger
from roadbook.core.metrics import use_case_errors
from roadbook.domain.errors import (
    RoadbookError,
    StorageError,
    TripNotFoundError,
    ValidationFailedError,
)
from roadbook.domain.result import Err, Ok, Result
from roadbook.domain.trip import Trip
from roadbook.domain.validation import TripValidator, TripValidatorIface, ValidationResult
from roadbook.storage.interfaces import SessionPrefsIface, TripRepoIface

T = TypeVar("T")

logger = get_logger(__name__)


async def run_use_case(
    operation: str, action: Callable[[], Awaitable[T]], **context: Any
) -> Result[T]:
    """
    Run one use case invocation and fold its outcome into a Result.

    Domain errors are returned as-is; anything else coming from a lower
    layer is wrapped in StorageError keeping the original message.
    """
    log = logger.bind(operation=operation, **context)
    log.info("Operation started")

    try:
        value = await action()
    except RoadbookError as e:
        use_case_errors.labels(operation=operation, kind=e.kind).inc()
        log.warning("Operation failed", kind=e.kind, error=e.message)
        return Err(e, e.message)
    except Exception as e:
        wrapped = StorageError(str(e) or type(e).__name__)
        wrapped.__cause__ = e
        use_case_errors.labels(operation=operation, kind=wrapped.kind).inc()
        log.exception("Operation failed unexpectedly", kind=wrapped.kind)
        return Err(wrapped, wrapped.message)

    log.info("Operation completed")
    return Ok(value)


def ensure_valid(result: ValidationResult) -> None:
    """Raise ValidationFailedError for an Invalid result."""
    if result.is_invalid:
        raise ValidationFailedError(result.error_message or "Validation failed")


class TripUseCase:
    """Base class holding the collaborators every trip use case needs."""

    def __init__(
        self,
        trips: TripRepoIface,
        session_prefs: SessionPrefsIface,
        validator: TripValidatorIface | None = None,
        clock: Clock | None = None,
    ):
        self.trips = trips
        self.session_prefs = session_prefs
        self.clock = clock or system_clock
        self.validator = validator or TripValidator(now_ms=self.clock.now_ms)

    async def load_trip(self, trip_id: int) -> Trip:
        trip = await self.trips.get_by_id(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        return trip
