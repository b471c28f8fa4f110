"""Pairing of outward and return trips into numbered reporting groups."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from roadbook.domain.trip import Trip, TripStatus

MS_PER_HOUR = 3_600_000

REPORTABLE_STATUSES = (TripStatus.COMPLETED, TripStatus.SKIPPED)


@dataclass(frozen=True)
class TripGroup:
    """Outward trip with its optional return leg (one seance)."""

    outward: Trip
    return_trip: Trip | None
    seance_number: int

    @property
    def total_kms(self) -> int:
        return self.outward.distance_km + (
            self.return_trip.distance_km if self.return_trip else 0
        )

    @property
    def has_return(self) -> bool:
        return (
            self.return_trip is not None
            and self.return_trip.status is not TripStatus.SKIPPED
        )

    @property
    def is_complete(self) -> bool:
        return self.outward.status is TripStatus.COMPLETED and (
            self.return_trip is None or self.return_trip.status in REPORTABLE_STATUSES
        )

    @property
    def driven_ms(self) -> int:
        return _driven_ms(self.outward) + _driven_ms(self.return_trip)

    @property
    def trip_ids(self) -> tuple[int, ...]:
        if self.return_trip is None:
            return (self.outward.id,)
        return (self.outward.id, self.return_trip.id)


def group_trips(trips: Iterable[Trip]) -> list[TripGroup]:
    """
    Build reporting groups from the full trip list.

    Only COMPLETED/SKIPPED trips are considered. Groups are numbered in
    chronological order of the outward trip (oldest is seance 1) and returned
    most recent first.
    """
    reportable = sorted(
        (t for t in trips if t.status in REPORTABLE_STATUSES),
        key=lambda t: t.start_time,
    )

    groups: list[TripGroup] = []
    consumed: set[int] = set()

    for trip in reportable:
        if trip.is_return or trip.id in consumed:
            continue

        return_trip = next(
            (t for t in reportable if t.is_return and t.paired_trip_id == trip.id),
            None,
        )
        groups.append(
            TripGroup(outward=trip, return_trip=return_trip, seance_number=len(groups) + 1)
        )

        consumed.add(trip.id)
        if return_trip is not None:
            consumed.add(return_trip.id)

    groups.reverse()
    return groups


@dataclass(frozen=True)
class TripStats:
    """Aggregate figures over reporting groups."""

    total_trips: int = 0
    total_km: int = 0
    total_hours: float = 0.0

    @property
    def average_km_per_trip(self) -> float:
        return self.total_km / self.total_trips if self.total_trips else 0.0


def _driven_ms(trip: Trip | None) -> int:
    if trip is None or trip.end_time is None:
        return 0
    return trip.end_time - trip.start_time


def compute_trip_stats(groups: Sequence[TripGroup]) -> TripStats:
    """Totals for the history summary."""
    total_ms = sum(g.driven_ms for g in groups)
    return TripStats(
        total_trips=len(groups),
        total_km=sum(g.total_kms for g in groups),
        total_hours=total_ms / MS_PER_HOUR,
    )
