"""Tests for the return leg use cases."""

import pytest

from roadbook.domain.driving_state import DrivingState, derive_driving_state
from roadbook.domain.result import Ok
from roadbook.domain.trip import TripStatus
from tests.conftest import NOW_MS
from tests.factories import make_completed_outward, make_return


@pytest.fixture
def outward():
    return make_completed_outward(trip_id=1, start_km=100, end_km=150)


@pytest.fixture
def ready(trip_repo, outward):
    ready = make_return(2, outward, status=TripStatus.READY, start_time=0)
    trip_repo.seed(outward, ready)
    return ready


@pytest.mark.unit
class TestStartReturn:
    async def test_starts_from_stored_km(self, use_cases, trip_repo, session_prefs, ready):
        result = await use_cases.start_return(ready.id)

        assert isinstance(result, Ok)
        started = result.value
        assert started.status is TripStatus.ACTIVE
        assert started.start_km == 150
        assert started.start_time == NOW_MS
        assert await session_prefs.get_ongoing_session_id() == ready.id
        assert derive_driving_state(await trip_repo.list_all()) is DrivingState.RETURN_ACTIVE

    async def test_actual_start_km_overrides(self, use_cases, ready):
        result = await use_cases.start_return(ready.id, actual_start_km=160)
        assert result.value.start_km == 160

    async def test_invalid_actual_start_km(self, use_cases, trip_repo, ready):
        result = await use_cases.start_return(ready.id, actual_start_km=-1)

        assert result.kind == "validation_failed"
        assert (await trip_repo.get_by_id(ready.id)).status is TripStatus.READY

    async def test_requires_ready_status(self, use_cases, ready):
        assert (await use_cases.start_return(ready.id)).is_ok
        result = await use_cases.start_return(ready.id)
        assert result.kind == "invalid_state"

    async def test_rejects_outward_trip(self, use_cases, outward, ready):
        result = await use_cases.start_return(outward.id)
        assert result.kind == "invalid_state"

    async def test_unknown_trip(self, use_cases):
        assert (await use_cases.start_return(77)).kind == "not_found"


@pytest.mark.unit
class TestFinishReturn:
    async def test_finishes_with_stored_end_place(
        self, use_cases, trip_repo, session_prefs, ready
    ):
        await use_cases.start_return(ready.id)

        result = await use_cases.finish_return(ready.id, end_km=200)

        assert isinstance(result, Ok)
        finished = result.value
        assert finished.status is TripStatus.COMPLETED
        assert finished.end_km == 200
        assert finished.end_place == "Paris"
        assert finished.end_time == NOW_MS
        assert await session_prefs.get_ongoing_session_id() is None
        assert derive_driving_state(await trip_repo.list_all()) is DrivingState.IDLE

    async def test_end_place_defaults_to_empty(self, use_cases, trip_repo, outward):
        active = make_return(3, outward, status=TripStatus.ACTIVE, end_place=None)
        trip_repo.seed(outward, active)

        result = await use_cases.finish_return(active.id, end_km=200)

        assert result.value.end_place == ""

    async def test_km_inconsistency_then_override(self, use_cases, ready):
        await use_cases.start_return(ready.id)

        result = await use_cases.finish_return(ready.id, end_km=150)
        assert result.kind == "km_inconsistency"
        assert (result.error.start_km, result.error.end_km) == (150, 150)

        retried = await use_cases.finish_return(ready.id, end_km=150, allow_inconsistent_km=True)
        assert retried.value.status is TripStatus.COMPLETED
        assert retried.value.end_km == 150

    @pytest.mark.parametrize("end_km", [-1, 1_000_000])
    async def test_out_of_range_reading_cannot_be_overridden(
        self, use_cases, trip_repo, ready, end_km
    ):
        await use_cases.start_return(ready.id)

        for allow in (False, True):
            result = await use_cases.finish_return(
                ready.id, end_km=end_km, allow_inconsistent_km=allow
            )
            assert result.kind == "validation_failed"

        stored = await trip_repo.get_by_id(ready.id)
        assert stored.status is TripStatus.ACTIVE
        assert stored.end_km is None

    async def test_requires_active_return(self, use_cases, ready):
        result = await use_cases.finish_return(ready.id, end_km=200)
        assert result.kind == "invalid_state"


@pytest.mark.unit
class TestCancelReturn:
    async def test_cancels_ready_return(self, use_cases, trip_repo, session_prefs, ready):
        await session_prefs.set_ongoing_session_id(ready.id)

        result = await use_cases.cancel_return(ready.id)

        cancelled = result.value
        assert cancelled.status is TripStatus.CANCELLED
        assert (cancelled.start_km, cancelled.end_km) == (ready.start_km, ready.end_km)
        assert (cancelled.start_time, cancelled.end_time) == (ready.start_time, ready.end_time)
        assert await session_prefs.get_ongoing_session_id() is None
        assert derive_driving_state(await trip_repo.list_all()) is DrivingState.IDLE

    async def test_cancels_active_return(self, use_cases, ready):
        await use_cases.start_return(ready.id)
        result = await use_cases.cancel_return(ready.id)
        assert result.value.status is TripStatus.CANCELLED

    async def test_cannot_cancel_finished_return(self, use_cases, trip_repo, outward):
        finished = make_return(3, outward)
        trip_repo.seed(outward, finished)
        assert (await use_cases.cancel_return(finished.id)).kind == "invalid_state"
