"""Use cases orchestrating validation and storage."""

from dataclasses import dataclass

from roadbook.core.clock import Clock, system_clock
from roadbook.domain.validation import TripValidator, TripValidatorIface
from roadbook.storage.interfaces import SessionPrefsIface, SettingsRepoIface, TripRepoIface

from .base import TripUseCase, run_use_case
from .delete_group import DeleteTripGroup
from .edit_trip import EditTrip
from .outward import DecideTripType, FinishOutward, StartOutward
from .overview import LogbookSnapshot, build_snapshot, load_snapshot, watch_snapshots
from .return_trip import CancelReturn, FinishReturn, StartReturn
from .settings import UserSettingsService


@dataclass
class TripUseCases:
    """All trip use cases wired to the same collaborators."""

    start_outward: StartOutward
    finish_outward: FinishOutward
    decide_trip_type: DecideTripType
    start_return: StartReturn
    finish_return: FinishReturn
    cancel_return: CancelReturn
    edit_trip: EditTrip
    delete_trip_group: DeleteTripGroup

    @classmethod
    def create(
        cls,
        trips: TripRepoIface,
        session_prefs: SessionPrefsIface,
        validator: TripValidatorIface | None = None,
        clock: Clock | None = None,
    ) -> "TripUseCases":
        clock = clock or system_clock
        validator = validator or TripValidator(now_ms=clock.now_ms)
        deps = dict(
            trips=trips, session_prefs=session_prefs, validator=validator, clock=clock
        )
        return cls(
            start_outward=StartOutward(**deps),
            finish_outward=FinishOutward(**deps),
            decide_trip_type=DecideTripType(**deps),
            start_return=StartReturn(**deps),
            finish_return=FinishReturn(**deps),
            cancel_return=CancelReturn(**deps),
            edit_trip=EditTrip(**deps),
            delete_trip_group=DeleteTripGroup(trips),
        )


__all__ = [
    "TripUseCase",
    "TripUseCases",
    "run_use_case",
    "StartOutward",
    "FinishOutward",
    "DecideTripType",
    "StartReturn",
    "FinishReturn",
    "CancelReturn",
    "EditTrip",
    "DeleteTripGroup",
    "UserSettingsService",
    "SettingsRepoIface",
    "LogbookSnapshot",
    "build_snapshot",
    "load_snapshot",
    "watch_snapshots",
]
