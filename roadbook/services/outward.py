"""Outward leg use cases: start, finish and the return decision."""

from roadbook.core.logging import get_logger
from roadbook.core.metrics import km_inconsistency, trips_finished, trips_started
from roadbook.domain.errors import KmInconsistencyError, TripStateError
from roadbook.domain.result import Result
from roadbook.domain.trip import Trip, TripStatus

from .base import TripUseCase, ensure_valid, run_use_case

logger = get_logger(__name__)


class StartOutward(TripUseCase):
    """Create a new ACTIVE outward trip and mark it as the ongoing session."""

    async def __call__(
        self,
        start_km: int,
        start_place: str,
        conditions: str = "",
        guide: str = "1",
    ) -> Result[int]:
        async def action() -> int:
            ensure_valid(
                self.validator.validate_outward_start(
                    start_km, start_place, conditions, guide
                )
            )

            in_progress = [
                t for t in await self.trips.list_all()
                if t.status is TripStatus.ACTIVE
            ]
            if in_progress:
                raise TripStateError(
                    f"A trip is already in progress (id: {in_progress[0].id})"
                )

            trip = Trip(
                start_km=start_km,
                start_place=start_place.strip(),
                start_time=self.clock.now_ms(),
                status=TripStatus.ACTIVE,
                conditions=conditions.strip(),
                guide=guide,
                date=self.clock.today().isoformat(),
            )
            trip_id = await self.trips.insert(trip)
            await self.session_prefs.set_ongoing_session_id(trip_id)

            trips_started.labels(direction="outward").inc()
            logger.info("Outward trip created", trip_id=trip_id, start_km=start_km)
            return trip_id

        return await run_use_case(
            "start_outward", action, start_km=start_km, start_place=start_place
        )


async def finish_trip(
    use_case: TripUseCase,
    trip: Trip,
    end_km: int,
    end_place: str,
    allow_inconsistent_km: bool,
) -> Trip:
    """Close an ACTIVE trip, enforcing the odometer override protocol.

    Out-of-range readings are plain validation failures; only a reading at
    or below the departure one can be overridden.
    """
    ensure_valid(use_case.validator.validate_start_km(end_km))
    if not allow_inconsistent_km:
        validation = use_case.validator.validate_end_km(trip.start_km, end_km)
        if validation.is_invalid:
            km_inconsistency.labels(outcome="rejected").inc()
            raise KmInconsistencyError(
                validation.error_message or "Inconsistent odometer reading",
                start_km=trip.start_km,
                end_km=end_km,
            )
    else:
        if use_case.validator.validate_end_km(trip.start_km, end_km).is_invalid:
            km_inconsistency.labels(outcome="overridden").inc()
        logger.info(
            "Km inconsistency accepted by user",
            trip_id=trip.id,
            start_km=trip.start_km,
            end_km=end_km,
        )

    finished = trip.model_copy(
        update={
            "end_km": end_km,
            "end_place": end_place,
            "end_time": use_case.clock.now_ms(),
            "status": TripStatus.COMPLETED,
        }
    )
    await use_case.trips.update(finished)
    await use_case.session_prefs.clear_ongoing_session_id()

    trips_finished.labels(direction="return" if trip.is_return else "outward").inc()
    logger.info(
        "Trip finished", trip_id=trip.id, start_km=trip.start_km, end_km=end_km
    )
    return finished


class FinishOutward(TripUseCase):
    """Close the ACTIVE outward trip."""

    async def __call__(
        self,
        trip_id: int,
        end_km: int,
        end_place: str,
        allow_inconsistent_km: bool = False,
    ) -> Result[Trip]:
        async def action() -> Trip:
            trip = await self.load_trip(trip_id)
            if trip.is_return:
                raise TripStateError(f"Trip {trip_id} is a return trip")
            if trip.status is not TripStatus.ACTIVE:
                raise TripStateError(
                    f"Trip {trip_id} is not in progress (status: {trip.status.value})"
                )

            ensure_valid(self.validator.validate_place(end_place))
            return await finish_trip(
                self, trip, end_km, end_place.strip(), allow_inconsistent_km
            )

        return await run_use_case(
            "finish_outward",
            action,
            trip_id=trip_id,
            end_km=end_km,
            allow_inconsistent_km=allow_inconsistent_km,
        )


class DecideTripType(TripUseCase):
    """
    Record what follows a finished outward trip.

    With ``prepare_return`` a READY return row is created from the outward
    end point and becomes the ongoing session. Otherwise a SKIPPED return
    placeholder is created and the outward trip is marked as simple, so the
    seance is reportable right away.
    """

    async def __call__(self, trip_id: int, prepare_return: bool) -> Result[int]:
        async def action() -> int:
            outward = await self.load_trip(trip_id)
            if outward.is_return:
                raise TripStateError(f"Trip {trip_id} is a return trip")
            if not outward.is_finished:
                raise TripStateError(f"Trip {trip_id} is not finished")
            if outward.is_simple or any(
                t.is_return and t.paired_trip_id == outward.id
                for t in await self.trips.list_all()
            ):
                raise TripStateError(f"Trip type already decided for trip {trip_id}")

            if prepare_return:
                return await self._prepare_return(outward)
            return await self._mark_simple(outward)

        return await run_use_case(
            "decide_trip_type", action, trip_id=trip_id, prepare_return=prepare_return
        )

    async def _prepare_return(self, outward: Trip) -> int:
        return_trip = Trip(
            start_km=outward.end_km,
            start_place=outward.end_place,
            end_place=outward.start_place,
            start_time=0,
            is_return=True,
            paired_trip_id=outward.id,
            status=TripStatus.READY,
            conditions=outward.conditions,
            guide=outward.guide,
            date=outward.date,
        )
        return_id = await self.trips.insert(return_trip)
        await self.session_prefs.set_ongoing_session_id(return_id)

        logger.info("Return trip prepared", trip_id=outward.id, return_trip_id=return_id)
        return return_id

    async def _mark_simple(self, outward: Trip) -> int:
        # Placeholder is already closed: zero distance, never drivable
        placeholder = Trip(
            start_km=outward.end_km,
            end_km=outward.end_km,
            start_place=outward.end_place,
            end_place=outward.start_place,
            start_time=outward.end_time,
            end_time=outward.end_time,
            is_return=True,
            paired_trip_id=outward.id,
            status=TripStatus.SKIPPED,
            conditions=outward.conditions,
            guide=outward.guide,
            date=outward.date,
        )
        placeholder_id = await self.trips.insert(placeholder)
        await self.trips.update(outward.model_copy(update={"paired_trip_id": outward.id}))
        await self.session_prefs.clear_ongoing_session_id()

        logger.info(
            "Trip marked as simple", trip_id=outward.id, placeholder_id=placeholder_id
        )
        return placeholder_id
