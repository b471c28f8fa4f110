"""Read-side projection of the logbook for presentation layers."""

from collections.abc import AsyncIterator, Iterable
from contextlib import aclosing
from dataclasses import dataclass

from roadbook.domain.driving_state import (
    DrivingState,
    derive_driving_state,
    find_current_trip,
)
from roadbook.domain.grouping import TripGroup, TripStats, compute_trip_stats, group_trips
from roadbook.domain.trip import Trip
from roadbook.storage.interfaces import TripRepoIface


@dataclass(frozen=True)
class LogbookSnapshot:
    """Everything derived from one snapshot of the trip collection."""

    trips: tuple[Trip, ...]
    state: DrivingState
    current_trip: Trip | None
    groups: tuple[TripGroup, ...]
    stats: TripStats

    def find_group(self, outward_id: int) -> TripGroup | None:
        return next((g for g in self.groups if g.outward.id == outward_id), None)


def build_snapshot(trips: Iterable[Trip]) -> LogbookSnapshot:
    trips = tuple(trips)
    state = derive_driving_state(trips)
    groups = tuple(group_trips(trips))
    return LogbookSnapshot(
        trips=trips,
        state=state,
        current_trip=find_current_trip(trips, state),
        groups=groups,
        stats=compute_trip_stats(groups),
    )


async def load_snapshot(trips: TripRepoIface) -> LogbookSnapshot:
    return build_snapshot(await trips.list_all())


async def watch_snapshots(trips: TripRepoIface) -> AsyncIterator[LogbookSnapshot]:
    """Re-derive state and groups every time the trip collection changes."""
    async with aclosing(trips.observe()) as collections:
        async for collection in collections:
            yield build_snapshot(collection)
