"""Narrow field edits on recorded trips.

Each edit re-validates only its own field plus a single cross-check against
the sibling value already stored; no other field is read for validation or
written.
"""

from datetime import date as Date

from roadbook.core.logging import get_logger
from roadbook.domain.errors import TripStateError, ValidationFailedError
from roadbook.domain.result import Result
from roadbook.domain.trip import Trip

from .base import TripUseCase, ensure_valid, run_use_case

logger = get_logger(__name__)


class EditTrip(TripUseCase):
    """Field-by-field editing of a trip."""

    async def _replace(self, trip: Trip, field: str, value) -> Trip:
        edited = trip.model_copy(update={field: value})
        await self.trips.update(edited)
        logger.info("Trip field updated", trip_id=trip.id, field=field)
        return edited

    async def _load_finished(self, trip_id: int) -> Trip:
        trip = await self.load_trip(trip_id)
        if not trip.is_terminal:
            raise TripStateError(
                f"Trip {trip_id} is not finished (status: {trip.status.value})"
            )
        return trip

    async def edit_date(self, trip_id: int, new_date: str) -> Result[Trip]:
        async def action() -> Trip:
            try:
                parsed = Date.fromisoformat(new_date)
            except ValueError:
                raise ValidationFailedError(
                    "Date must be in ISO-8601 format (YYYY-MM-DD)"
                ) from None
            trip = await self.load_trip(trip_id)
            return await self._replace(trip, "date", parsed.isoformat())

        return await run_use_case("edit_date", action, trip_id=trip_id)

    async def edit_conditions(self, trip_id: int, new_conditions: str) -> Result[Trip]:
        async def action() -> Trip:
            ensure_valid(self.validator.validate_conditions(new_conditions))
            trip = await self.load_trip(trip_id)
            return await self._replace(trip, "conditions", new_conditions.strip())

        return await run_use_case("edit_conditions", action, trip_id=trip_id)

    async def edit_start_time(self, trip_id: int, new_start_time: int) -> Result[Trip]:
        async def action() -> Trip:
            ensure_valid(self.validator.validate_timestamp(new_start_time))
            trip = await self.load_trip(trip_id)
            if trip.end_time is not None:
                ensure_valid(self.validator.validate_time_range(new_start_time, trip.end_time))
            return await self._replace(trip, "start_time", new_start_time)

        return await run_use_case("edit_start_time", action, trip_id=trip_id)

    async def edit_end_time(self, trip_id: int, new_end_time: int) -> Result[Trip]:
        async def action() -> Trip:
            ensure_valid(self.validator.validate_timestamp(new_end_time))
            trip = await self._load_finished(trip_id)
            ensure_valid(self.validator.validate_time_range(trip.start_time, new_end_time))
            return await self._replace(trip, "end_time", new_end_time)

        return await run_use_case("edit_end_time", action, trip_id=trip_id)

    async def edit_start_km(self, trip_id: int, new_start_km: int) -> Result[Trip]:
        async def action() -> Trip:
            ensure_valid(self.validator.validate_start_km(new_start_km))
            trip = await self.load_trip(trip_id)
            if trip.end_km is not None and new_start_km >= trip.end_km:
                raise ValidationFailedError(
                    f"New departure odometer ({new_start_km} km) must be lower "
                    f"than arrival ({trip.end_km} km)"
                )
            return await self._replace(trip, "start_km", new_start_km)

        return await run_use_case(
            "edit_start_km", action, trip_id=trip_id, new_start_km=new_start_km
        )

    async def edit_end_km(self, trip_id: int, new_end_km: int) -> Result[Trip]:
        async def action() -> Trip:
            trip = await self._load_finished(trip_id)
            ensure_valid(self.validator.validate_end_km(trip.start_km, new_end_km))
            return await self._replace(trip, "end_km", new_end_km)

        return await run_use_case(
            "edit_end_km", action, trip_id=trip_id, new_end_km=new_end_km
        )
