"""Derivation of the current driving state from the trip collection."""

import enum
from collections.abc import Iterable, Sequence

from roadbook.domain.trip import Trip, TripStatus


class DrivingState(str, enum.Enum):
    """Process-level state, recomputed from trips on every read."""

    IDLE = "IDLE"
    OUTWARD_ACTIVE = "OUTWARD_ACTIVE"
    ARRIVED = "ARRIVED"  # outward done, waiting for the return decision
    RETURN_READY = "RETURN_READY"
    RETURN_ACTIVE = "RETURN_ACTIVE"
    COMPLETED = "COMPLETED"


def _in_progress(trip: Trip) -> bool:
    # READY and CANCELLED return rows also lack end_km but are not being driven
    return trip.end_km is None and trip.status is TripStatus.ACTIVE


def derive_driving_state(trips: Iterable[Trip]) -> DrivingState:
    """
    Map the full trip collection to exactly one driving state.

    Rules are checked by priority, first match wins:
    1. a return trip being driven (no end_km yet) -> RETURN_ACTIVE
    2. an outward trip being driven (no end_km yet) -> OUTWARD_ACTIVE
    3. a READY return trip -> RETURN_READY
    4. latest completed outward trip with no return row -> ARRIVED
    5. IDLE when empty or all terminal, COMPLETED otherwise
    """
    trips = tuple(trips)

    if any(t.is_return and _in_progress(t) for t in trips):
        return DrivingState.RETURN_ACTIVE

    if any(not t.is_return and _in_progress(t) for t in trips):
        return DrivingState.OUTWARD_ACTIVE

    if any(t.is_return and t.status is TripStatus.READY for t in trips):
        return DrivingState.RETURN_READY

    if find_arrived_trip(trips) is not None:
        return DrivingState.ARRIVED

    if all(t.status.is_terminal for t in trips):
        return DrivingState.IDLE
    # Non-terminal rows matching no rule above, e.g. an ACTIVE trip that already has end_km
    return DrivingState.COMPLETED


def find_arrived_trip(trips: Sequence[Trip]) -> Trip | None:
    """Latest completed outward trip that has no return row yet."""
    completed_outwards = [
        t for t in trips if not t.is_return and t.status is TripStatus.COMPLETED
    ]
    if not completed_outwards:
        return None

    latest = max(completed_outwards, key=lambda t: t.id)
    has_return = any(t.is_return and t.paired_trip_id == latest.id for t in trips)
    return None if has_return else latest


def find_current_trip(trips: Iterable[Trip], state: DrivingState) -> Trip | None:
    """Trip the given state refers to, if any."""
    trips = tuple(trips)

    if state is DrivingState.RETURN_ACTIVE:
        candidates = [t for t in trips if t.is_return and _in_progress(t)]
    elif state is DrivingState.OUTWARD_ACTIVE:
        candidates = [t for t in trips if not t.is_return and _in_progress(t)]
    elif state is DrivingState.RETURN_READY:
        candidates = [t for t in trips if t.is_return and t.status is TripStatus.READY]
    elif state is DrivingState.ARRIVED:
        return find_arrived_trip(trips)
    else:
        return None

    return max(candidates, key=lambda t: t.id) if candidates else None
