"""SQLAlchemy implementations of the repository interfaces."""

from collections.abc import AsyncIterator, Iterator
from contextlib import contextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roadbook.core.logging import get_logger
from roadbook.domain.errors import StorageError
from roadbook.domain.trip import Trip, TripStatus
from roadbook.domain.user_settings import DEFAULT_USER_SETTINGS, ThemeMode, UserSettings

from .interfaces import SessionPrefsIface, SettingsRepoIface, TripRepoIface
from .live import ChangeFeed, observe_snapshots
from .models import PreferenceRecord, TripRecord

logger = get_logger(__name__)

ONGOING_SESSION_ID_KEY = "ongoing_session_id"
THEME_MODE_KEY = "theme_mode"
DEFAULT_GUIDE_KEY = "default_guide"
SHOW_DELETE_CONFIRMATIONS_KEY = "show_delete_confirmations"
DATE_FORMAT_KEY = "date_format"
SETTINGS_KEYS = (
    THEME_MODE_KEY,
    DEFAULT_GUIDE_KEY,
    SHOW_DELETE_CONFIRMATIONS_KEY,
    DATE_FORMAT_KEY,
)


@contextmanager
def storage_errors() -> Iterator[None]:
    """Re-raise database failures as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Storage operation failed", error=str(e))
        raise StorageError(str(e)) from e


def record_to_trip(record: TripRecord) -> Trip:
    # Unknown stored statuses fall back to ACTIVE
    status = TripStatus.parse_or_none(record.status) or TripStatus.ACTIVE
    return Trip(
        id=record.id,
        start_km=record.start_km,
        end_km=record.end_km,
        start_place=record.start_place,
        end_place=record.end_place,
        start_time=record.start_time,
        end_time=record.end_time,
        is_return=record.is_return,
        paired_trip_id=record.paired_trip_id,
        status=status,
        conditions=record.conditions,
        guide=record.guide,
        date=record.date,
    )


def _apply(record: TripRecord, trip: Trip) -> None:
    record.start_km = trip.start_km
    record.end_km = trip.end_km
    record.start_place = trip.start_place
    record.end_place = trip.end_place
    record.start_time = trip.start_time
    record.end_time = trip.end_time
    record.is_return = trip.is_return
    record.paired_trip_id = trip.paired_trip_id
    record.status = trip.status.value
    record.conditions = trip.conditions
    record.guide = trip.guide
    record.date = trip.date


class SqlTripRepository(TripRepoIface):
    """Trips stored in the `trips` table, one session per call."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        feed: ChangeFeed | None = None,
    ):
        self.session_maker = session_maker
        self.feed = feed or ChangeFeed()

    async def insert(self, trip: Trip) -> int:
        record = TripRecord()
        _apply(record, trip)
        with storage_errors():
            async with self.session_maker() as session:
                session.add(record)
                await session.commit()
                trip_id = record.id
        self.feed.notify()
        return trip_id

    async def update(self, trip: Trip) -> None:
        with storage_errors():
            async with self.session_maker() as session:
                record = await session.get(TripRecord, trip.id)
                if record is None:
                    raise StorageError(f"Cannot update missing trip {trip.id}")
                _apply(record, trip)
                await session.commit()
        self.feed.notify()

    async def delete(self, trip: Trip) -> None:
        with storage_errors():
            async with self.session_maker() as session:
                await session.execute(delete(TripRecord).where(TripRecord.id == trip.id))
                await session.commit()
        self.feed.notify()

    async def get_by_id(self, trip_id: int) -> Trip | None:
        with storage_errors():
            async with self.session_maker() as session:
                record = await session.get(TripRecord, trip_id)
                return record_to_trip(record) if record else None

    async def list_all(self) -> tuple[Trip, ...]:
        with storage_errors():
            async with self.session_maker() as session:
                result = await session.execute(
                    select(TripRecord).order_by(TripRecord.start_time.desc())
                )
                return tuple(record_to_trip(r) for r in result.scalars().all())

    def observe(self) -> AsyncIterator[tuple[Trip, ...]]:
        return observe_snapshots(self.feed, self.list_all)


class SqlKeyValueStore:
    """Access to the `preferences` table."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        feed: ChangeFeed | None = None,
    ):
        self.session_maker = session_maker
        self.feed = feed or ChangeFeed()

    async def get_many(self, keys: tuple[str, ...]) -> dict[str, str]:
        with storage_errors():
            async with self.session_maker() as session:
                result = await session.execute(
                    select(PreferenceRecord).where(PreferenceRecord.key.in_(keys))
                )
                return {r.key: r.value for r in result.scalars().all()}

    async def get(self, key: str) -> str | None:
        return (await self.get_many((key,))).get(key)

    async def set(self, key: str, value: str) -> None:
        with storage_errors():
            async with self.session_maker() as session:
                record = await session.get(PreferenceRecord, key)
                if record is None:
                    session.add(PreferenceRecord(key=key, value=value))
                else:
                    record.value = value
                await session.commit()
        self.feed.notify()

    async def remove(self, *keys: str) -> None:
        with storage_errors():
            async with self.session_maker() as session:
                await session.execute(
                    delete(PreferenceRecord).where(PreferenceRecord.key.in_(keys))
                )
                await session.commit()
        self.feed.notify()


class SqlSessionPrefs(SessionPrefsIface):
    """Ongoing session marker stored as a preference key."""

    def __init__(self, store: SqlKeyValueStore):
        self.store = store

    async def get_ongoing_session_id(self) -> int | None:
        value = await self.store.get(ONGOING_SESSION_ID_KEY)
        if value is None:
            return None
        try:
            trip_id = int(value)
        except ValueError:
            logger.warning("Ignoring malformed ongoing session id", value=value)
            return None
        return trip_id if trip_id > 0 else None

    async def set_ongoing_session_id(self, trip_id: int) -> None:
        await self.store.set(ONGOING_SESSION_ID_KEY, str(trip_id))

    async def clear_ongoing_session_id(self) -> None:
        await self.store.remove(ONGOING_SESSION_ID_KEY)

    def observe_ongoing_session_id(self) -> AsyncIterator[int | None]:
        return observe_snapshots(self.store.feed, self.get_ongoing_session_id)


class SqlSettingsRepository(SettingsRepoIface):
    """User settings stored as preference keys."""

    def __init__(self, store: SqlKeyValueStore):
        self.store = store

    async def get_settings(self) -> UserSettings:
        values = await self.store.get_many(SETTINGS_KEYS)
        defaults = DEFAULT_USER_SETTINGS

        theme_mode = defaults.theme_mode
        if THEME_MODE_KEY in values:
            try:
                theme_mode = ThemeMode(values[THEME_MODE_KEY])
            except ValueError:
                logger.warning("Ignoring unknown theme mode", value=values[THEME_MODE_KEY])

        show_confirmations = defaults.show_delete_confirmations
        if SHOW_DELETE_CONFIRMATIONS_KEY in values:
            show_confirmations = values[SHOW_DELETE_CONFIRMATIONS_KEY] == "true"

        return UserSettings(
            theme_mode=theme_mode,
            default_guide=values.get(DEFAULT_GUIDE_KEY, defaults.default_guide),
            show_delete_confirmations=show_confirmations,
            date_format=values.get(DATE_FORMAT_KEY, defaults.date_format),
        )

    async def update_theme_mode(self, theme_mode: ThemeMode) -> None:
        await self.store.set(THEME_MODE_KEY, theme_mode.value)

    async def update_default_guide(self, guide: str) -> None:
        await self.store.set(DEFAULT_GUIDE_KEY, guide)

    async def update_show_delete_confirmations(self, show: bool) -> None:
        await self.store.set(SHOW_DELETE_CONFIRMATIONS_KEY, "true" if show else "false")

    async def update_date_format(self, date_format: str) -> None:
        await self.store.set(DATE_FORMAT_KEY, date_format)

    async def reset_to_defaults(self) -> None:
        await self.store.remove(*SETTINGS_KEYS)

    def observe(self) -> AsyncIterator[UserSettings]:
        return observe_snapshots(self.store.feed, self.get_settings)
