"""Return leg use cases."""

from roadbook.core.logging import get_logger
from roadbook.core.metrics import trips_started
from roadbook.domain.errors import TripStateError
from roadbook.domain.result import Result
from roadbook.domain.trip import Trip, TripStatus

from .base import TripUseCase, ensure_valid, run_use_case
from .outward import finish_trip

logger = get_logger(__name__)


def _require_return(trip: Trip) -> None:
    if not trip.is_return:
        raise TripStateError(f"Trip {trip.id} is not a return trip")


class StartReturn(TripUseCase):
    """Start driving a READY return trip."""

    async def __call__(
        self, return_trip_id: int, actual_start_km: int | None = None
    ) -> Result[Trip]:
        async def action() -> Trip:
            trip = await self.load_trip(return_trip_id)
            _require_return(trip)
            if trip.status is not TripStatus.READY:
                raise TripStateError(
                    f"Return trip {return_trip_id} is not ready (status: {trip.status.value})"
                )

            start_km = actual_start_km if actual_start_km is not None else trip.start_km
            ensure_valid(self.validator.validate_start_km(start_km))

            started = trip.model_copy(
                update={
                    "start_km": start_km,
                    "start_time": self.clock.now_ms(),
                    "end_km": None,
                    "end_time": None,
                    "status": TripStatus.ACTIVE,
                }
            )
            await self.trips.update(started)
            await self.session_prefs.set_ongoing_session_id(return_trip_id)

            trips_started.labels(direction="return").inc()
            logger.info("Return trip started", trip_id=return_trip_id, start_km=start_km)
            return started

        return await run_use_case(
            "start_return",
            action,
            trip_id=return_trip_id,
            actual_start_km=actual_start_km,
        )


class FinishReturn(TripUseCase):
    """Close the ACTIVE return trip; the arrival place is not re-entered."""

    async def __call__(
        self, trip_id: int, end_km: int, allow_inconsistent_km: bool = False
    ) -> Result[Trip]:
        async def action() -> Trip:
            trip = await self.load_trip(trip_id)
            _require_return(trip)
            if trip.status is not TripStatus.ACTIVE:
                raise TripStateError(
                    f"Return trip {trip_id} is not in progress (status: {trip.status.value})"
                )

            end_place = trip.end_place if trip.end_place is not None else ""
            return await finish_trip(self, trip, end_km, end_place, allow_inconsistent_km)

        return await run_use_case(
            "finish_return",
            action,
            trip_id=trip_id,
            end_km=end_km,
            allow_inconsistent_km=allow_inconsistent_km,
        )


class CancelReturn(TripUseCase):
    """Cancel a prepared or running return trip without touching km or times."""

    async def __call__(self, return_trip_id: int) -> Result[Trip]:
        async def action() -> Trip:
            trip = await self.load_trip(return_trip_id)
            _require_return(trip)
            if trip.status not in (TripStatus.READY, TripStatus.ACTIVE):
                raise TripStateError(
                    f"Return trip {return_trip_id} cannot be cancelled (status: {trip.status.value})"
                )

            cancelled = trip.model_copy(update={"status": TripStatus.CANCELLED})
            await self.trips.update(cancelled)
            await self.session_prefs.clear_ongoing_session_id()

            logger.info("Return trip cancelled", trip_id=return_trip_id)
            return cancelled

        return await run_use_case("cancel_return", action, trip_id=return_trip_id)
