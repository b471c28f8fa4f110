"""Tests for the logbook snapshot projection and live observation."""

import asyncio

import pytest

from roadbook.domain.driving_state import DrivingState
from roadbook.services.overview import build_snapshot, load_snapshot, watch_snapshots
from roadbook.storage.live import ChangeFeed, observe_snapshots
from tests.factories import make_completed_outward, make_return


@pytest.mark.unit
def test_build_snapshot():
    outward = make_completed_outward(trip_id=1)
    snapshot = build_snapshot([outward, make_return(2, outward), make_completed_outward(trip_id=3)])

    assert snapshot.state is DrivingState.ARRIVED
    assert snapshot.current_trip.id == 3
    assert [g.outward.id for g in snapshot.groups] == [3, 1]
    assert snapshot.stats.total_trips == 2
    assert snapshot.find_group(1).return_trip.id == 2
    assert snapshot.find_group(2) is None


@pytest.mark.unit
async def test_load_snapshot_of_empty_repo(trip_repo):
    snapshot = await load_snapshot(trip_repo)
    assert snapshot.state is DrivingState.IDLE
    assert snapshot.current_trip is None
    assert snapshot.groups == ()


@pytest.mark.unit
async def test_watch_follows_use_cases(use_cases, trip_repo):
    snapshots = watch_snapshots(trip_repo)
    try:
        first = await anext(snapshots)
        assert first.state is DrivingState.IDLE

        trip_id = (await use_cases.start_outward(start_km=100, start_place="Paris")).unwrap()
        assert (await anext(snapshots)).state is DrivingState.OUTWARD_ACTIVE

        await use_cases.finish_outward(trip_id, end_km=140, end_place="Lyon")
        assert (await anext(snapshots)).state is DrivingState.ARRIVED
    finally:
        await snapshots.aclose()

    assert trip_repo.feed.subscriber_count == 0


@pytest.mark.unit
async def test_observer_collapses_bursts():
    feed = ChangeFeed()
    loads = []

    async def load():
        loads.append(len(loads))
        return len(loads)

    snapshots = observe_snapshots(feed, load)
    try:
        assert await anext(snapshots) == 1
        feed.notify()
        feed.notify()
        feed.notify()
        assert await anext(snapshots) == 2

        pending = asyncio.ensure_future(anext(snapshots))
        await asyncio.sleep(0)
        assert not pending.done()
        feed.notify()
        assert await asyncio.wait_for(pending, timeout=1) == 3
    finally:
        await snapshots.aclose()


@pytest.mark.unit
async def test_session_marker_observation(session_prefs):
    values = session_prefs.observe_ongoing_session_id()
    try:
        assert await anext(values) is None
        await session_prefs.set_ongoing_session_id(5)
        assert await anext(values) == 5
        await session_prefs.clear_ongoing_session_id()
        assert await anext(values) is None
    finally:
        await values.aclose()
