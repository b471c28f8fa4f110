"""In-memory fake repository implementations for use case and contract tests."""

from collections.abc import AsyncIterator

from roadbook.domain.errors import StorageError
from roadbook.domain.trip import Trip
from roadbook.domain.user_settings import DEFAULT_USER_SETTINGS, ThemeMode, UserSettings
from roadbook.storage.interfaces import SessionPrefsIface, SettingsRepoIface, TripRepoIface
from roadbook.storage.live import ChangeFeed, observe_snapshots


class TripRepoFake(TripRepoIface):
    """In-memory fake implementation of the trips repository."""

    def __init__(self, *trips: Trip):
        self._trips: dict[int, Trip] = {}
        self._counter = 0
        self.feed = ChangeFeed()
        # Trip ids whose deletion raises, to simulate a storage failure
        self.fail_on_delete: set[int] = set()
        self.seed(*trips)

    def seed(self, *trips: Trip) -> None:
        """Store trips as-is, without notifying observers."""
        for trip in trips:
            if trip.id == 0:
                self._counter += 1
                trip = trip.model_copy(update={"id": self._counter})
            self._trips[trip.id] = trip
            self._counter = max(self._counter, trip.id)

    async def insert(self, trip: Trip) -> int:
        self._counter += 1
        self._trips[self._counter] = trip.model_copy(update={"id": self._counter})
        self.feed.notify()
        return self._counter

    async def update(self, trip: Trip) -> None:
        if trip.id not in self._trips:
            raise StorageError(f"Cannot update missing trip {trip.id}")
        self._trips[trip.id] = trip
        self.feed.notify()

    async def delete(self, trip: Trip) -> None:
        if trip.id in self.fail_on_delete:
            raise OSError("disk I/O error")
        self._trips.pop(trip.id, None)
        self.feed.notify()

    async def get_by_id(self, trip_id: int) -> Trip | None:
        return self._trips.get(trip_id)

    async def list_all(self) -> tuple[Trip, ...]:
        return tuple(self._trips[k] for k in sorted(self._trips))

    def observe(self) -> AsyncIterator[tuple[Trip, ...]]:
        return observe_snapshots(self.feed, self.list_all)


class SessionPrefsFake(SessionPrefsIface):
    """In-memory fake ongoing session marker."""

    def __init__(self, ongoing_session_id: int | None = None):
        self._value = ongoing_session_id
        self.feed = ChangeFeed()

    async def get_ongoing_session_id(self) -> int | None:
        return self._value

    async def set_ongoing_session_id(self, trip_id: int) -> None:
        self._value = trip_id
        self.feed.notify()

    async def clear_ongoing_session_id(self) -> None:
        self._value = None
        self.feed.notify()

    def observe_ongoing_session_id(self) -> AsyncIterator[int | None]:
        return observe_snapshots(self.feed, self.get_ongoing_session_id)


class SettingsRepoFake(SettingsRepoIface):
    """In-memory fake user settings store."""

    def __init__(self, settings: UserSettings = DEFAULT_USER_SETTINGS):
        self._settings = settings
        self.feed = ChangeFeed()

    def _set(self, **changes) -> None:
        self._settings = self._settings.model_copy(update=changes)
        self.feed.notify()

    async def get_settings(self) -> UserSettings:
        return self._settings

    async def update_theme_mode(self, theme_mode: ThemeMode) -> None:
        self._set(theme_mode=theme_mode)

    async def update_default_guide(self, guide: str) -> None:
        self._set(default_guide=guide)

    async def update_show_delete_confirmations(self, show: bool) -> None:
        self._set(show_delete_confirmations=show)

    async def update_date_format(self, date_format: str) -> None:
        self._set(date_format=date_format)

    async def reset_to_defaults(self) -> None:
        self._settings = DEFAULT_USER_SETTINGS
        self.feed.notify()

    def observe(self) -> AsyncIterator[UserSettings]:
        return observe_snapshots(self.feed, self.get_settings)
