"""Domain exceptions for the trip lifecycle."""


class RoadbookError(Exception):
    """Base class for all logbook errors."""

    kind = "unexpected"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TripNotFoundError(RoadbookError):
    """Referenced trip id is absent from storage."""

    kind = "not_found"

    def __init__(self, trip_id: int, message: str | None = None):
        super().__init__(message or f"Trip not found (id: {trip_id})")
        self.trip_id = trip_id


class ValidationFailedError(RoadbookError):
    """A validator predicate failed."""

    kind = "validation_failed"


class KmInconsistencyError(ValidationFailedError):
    """Finishing odometer reading conflicts with the starting one.

    Raised only when the caller did not allow the override; the caller is
    expected to confirm with the user and retry with the override enabled.
    """

    kind = "km_inconsistency"

    def __init__(self, message: str, start_km: int, end_km: int):
        super().__init__(message)
        self.start_km = start_km
        self.end_km = end_km


class TripStateError(RoadbookError):
    """Trip is not in the lifecycle shape the operation requires."""

    kind = "invalid_state"


class StorageError(RoadbookError):
    """Lower-layer failure, wrapped with its original message."""

    kind = "unexpected"
