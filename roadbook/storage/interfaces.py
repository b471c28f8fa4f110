"""Repository interfaces for dependency injection."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator

from roadbook.domain.trip import Trip
from roadbook.domain.user_settings import ThemeMode, UserSettings


class TripRepoIface(ABC):
    """Interface for the trips repository."""

    @abstractmethod
    async def insert(self, trip: Trip) -> int:
        """Persist a new trip and return its assigned id."""
        pass

    @abstractmethod
    async def update(self, trip: Trip) -> None:
        """Replace the stored row having trip.id."""
        pass

    @abstractmethod
    async def delete(self, trip: Trip) -> None:
        """Delete the stored row having trip.id (no-op when absent)."""
        pass

    @abstractmethod
    async def get_by_id(self, trip_id: int) -> Trip | None:
        """Get trip by ID."""
        pass

    @abstractmethod
    async def list_all(self) -> tuple[Trip, ...]:
        """Snapshot of every stored trip, in no particular order."""
        pass

    @abstractmethod
    def observe(self) -> AsyncIterator[tuple[Trip, ...]]:
        """Current snapshot, then a new one after every write."""
        pass


class SessionPrefsIface(ABC):
    """Interface for the ongoing session marker."""

    @abstractmethod
    async def get_ongoing_session_id(self) -> int | None:
        pass

    @abstractmethod
    async def set_ongoing_session_id(self, trip_id: int) -> None:
        pass

    @abstractmethod
    async def clear_ongoing_session_id(self) -> None:
        pass

    @abstractmethod
    def observe_ongoing_session_id(self) -> AsyncIterator[int | None]:
        pass


class SettingsRepoIface(ABC):
    """Interface for user settings storage."""

    @abstractmethod
    async def get_settings(self) -> UserSettings:
        """Stored settings, defaults filled in for missing keys."""
        pass

    @abstractmethod
    async def update_theme_mode(self, theme_mode: ThemeMode) -> None:
        pass

    @abstractmethod
    async def update_default_guide(self, guide: str) -> None:
        pass

    @abstractmethod
    async def update_show_delete_confirmations(self, show: bool) -> None:
        pass

    @abstractmethod
    async def update_date_format(self, date_format: str) -> None:
        pass

    @abstractmethod
    async def reset_to_defaults(self) -> None:
        pass

    @abstractmethod
    def observe(self) -> AsyncIterator[UserSettings]:
        pass
