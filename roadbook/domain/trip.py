"""Trip entity and lifecycle status."""

import enum

from pydantic import BaseModel, ConfigDict, Field


class TripStatus(str, enum.Enum):
    """Lifecycle status of a trip."""

    ACTIVE = "ACTIVE"  # being driven, end_km is None
    COMPLETED = "COMPLETED"
    READY = "READY"  # return prepared, not started yet
    SKIPPED = "SKIPPED"  # explicit "no return" placeholder
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (TripStatus.COMPLETED, TripStatus.SKIPPED, TripStatus.CANCELLED)

    @property
    def is_active(self) -> bool:
        return self is TripStatus.ACTIVE

    @classmethod
    def parse(cls, value: str) -> "TripStatus":
        """Parse a status name, case-insensitively. Raises ValueError."""
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown trip status: {value!r}") from None

    @classmethod
    def parse_or_none(cls, value: str | None) -> "TripStatus | None":
        if value is None:
            return None
        try:
            return cls.parse(value)
        except ValueError:
            return None


class Trip(BaseModel):
    """One leg of a driving session (outward or return)."""

    model_config = ConfigDict(frozen=True)

    id: int = 0
    start_km: int
    end_km: int | None = None
    start_place: str
    end_place: str | None = None
    start_time: int = Field(..., description="Epoch milliseconds")
    end_time: int | None = None
    is_return: bool = False
    paired_trip_id: int | None = None
    status: TripStatus = TripStatus.ACTIVE
    conditions: str = ""
    guide: str = "1"
    date: str = Field(..., description="ISO-8601 calendar date")

    @property
    def distance_km(self) -> int:
        if self.end_km is not None and self.end_km >= self.start_km:
            return self.end_km - self.start_km
        return 0

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    @property
    def is_completed(self) -> bool:
        return self.status is TripStatus.COMPLETED

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def is_simple(self) -> bool:
        """Outward trip explicitly closed without a return."""
        return not self.is_return and self.id != 0 and self.paired_trip_id == self.id

    @property
    def is_finished(self) -> bool:
        return (
            self.end_km is not None
            and self.end_place is not None
            and self.end_time is not None
        )

    def __repr__(self) -> str:
        direction = "return" if self.is_return else "outward"
        return (
            f"<Trip(id={self.id}, {direction}, status={self.status.value}, "
            f"km={self.start_km}->{self.end_km})>"
        )
