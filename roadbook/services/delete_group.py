"""Deletion of a reporting group (outward trip and its return)."""

from roadbook.core.logging import get_logger
from roadbook.domain.grouping import TripGroup
from roadbook.domain.result import Result
from roadbook.storage.interfaces import TripRepoIface

from .base import run_use_case

logger = get_logger(__name__)


class DeleteTripGroup:
    """
    Delete the outward trip, then the return trip when present.

    The two deletions are independent writes: if the second one fails the
    outward trip stays deleted and the error is reported to the caller.
    """

    def __init__(self, trips: TripRepoIface):
        self.trips = trips

    async def __call__(self, group: TripGroup) -> Result[None]:
        async def action() -> None:
            await self.trips.delete(group.outward)
            logger.info("Outward trip deleted", trip_id=group.outward.id)

            if group.return_trip is not None:
                await self.trips.delete(group.return_trip)
                logger.info("Return trip deleted", trip_id=group.return_trip.id)

        return await run_use_case(
            "delete_trip_group",
            action,
            outward_id=group.outward.id,
            return_id=group.return_trip.id if group.return_trip else None,
        )
