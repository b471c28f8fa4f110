"""Unit tests for the trip entity and its status."""

import pytest
from pydantic import ValidationError

from roadbook.domain.trip import TripStatus
from tests.factories import make_completed_outward, make_trip


@pytest.mark.unit
class TestTripStatus:
    @pytest.mark.parametrize(
        "status", [TripStatus.COMPLETED, TripStatus.SKIPPED, TripStatus.CANCELLED]
    )
    def test_terminal_statuses(self, status):
        assert status.is_terminal

    @pytest.mark.parametrize("status", [TripStatus.ACTIVE, TripStatus.READY])
    def test_non_terminal_statuses(self, status):
        assert not status.is_terminal

    def test_parse_is_case_insensitive(self):
        assert TripStatus.parse("completed") is TripStatus.COMPLETED
        assert TripStatus.parse(" Ready ") is TripStatus.READY

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown trip status"):
            TripStatus.parse("PAUSED")

    def test_parse_or_none(self):
        assert TripStatus.parse_or_none("PAUSED") is None
        assert TripStatus.parse_or_none(None) is None
        assert TripStatus.parse_or_none("SKIPPED") is TripStatus.SKIPPED


@pytest.mark.unit
class TestTrip:
    def test_defaults(self):
        trip = make_trip()
        assert trip.end_km is None
        assert trip.is_return is False
        assert trip.status is TripStatus.ACTIVE
        assert trip.conditions == ""

    def test_distance_of_finished_trip(self):
        assert make_completed_outward(start_km=100, end_km=150).distance_km == 50

    def test_distance_of_unfinished_or_inconsistent_trip_is_zero(self):
        assert make_trip(start_km=100).distance_km == 0
        assert make_completed_outward(start_km=100, end_km=90).distance_km == 0

    def test_is_frozen(self):
        trip = make_trip()
        with pytest.raises(ValidationError):
            trip.start_km = 5

    def test_model_copy_leaves_original_untouched(self):
        trip = make_trip()
        finished = trip.model_copy(update={"end_km": 150, "status": TripStatus.COMPLETED})
        assert trip.end_km is None
        assert finished.end_km == 150
        assert finished.is_completed

    def test_simple_trip_points_at_itself(self):
        assert make_completed_outward(trip_id=5, paired_trip_id=5).is_simple
        assert not make_completed_outward(trip_id=5).is_simple
        assert not make_trip(id=5, is_return=True, paired_trip_id=5).is_simple

    def test_is_finished_requires_all_end_fields(self):
        assert make_completed_outward().is_finished
        assert not make_trip(end_km=150, end_place="Lyon").is_finished
