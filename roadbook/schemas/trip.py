"""Pydantic schemas for trip endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from roadbook.domain.driving_state import DrivingState
from roadbook.domain.trip import TripStatus


class OutwardStart(BaseModel):
    """Schema for starting an outward trip."""

    start_km: int = Field(..., description="Departure odometer reading")
    start_place: str = Field(..., description="Departure place")
    conditions: str = Field("", description="Driving conditions, free text")
    guide: str = Field("1", description="Accompanying guide number (1-9)")


class OutwardFinish(BaseModel):
    end_km: int
    end_place: str
    allow_inconsistent_km: bool = Field(
        False, description="Accept an odometer reading not above departure"
    )


class TripTypeDecision(BaseModel):
    prepare_return: bool = Field(..., description="True to prepare a return trip")


class ReturnStart(BaseModel):
    actual_start_km: int | None = Field(
        None, description="Odometer reading if it changed since arrival"
    )


class ReturnFinish(BaseModel):
    end_km: int
    allow_inconsistent_km: bool = False


class DateEdit(BaseModel):
    value: str = Field(..., description="ISO-8601 date")


class TextEdit(BaseModel):
    value: str


class TimestampEdit(BaseModel):
    value: int = Field(..., description="Epoch milliseconds")


class KmEdit(BaseModel):
    value: int


class TripResponse(BaseModel):
    """Schema for trip response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_km: int
    end_km: int | None
    start_place: str
    end_place: str | None
    start_time: int
    end_time: int | None
    is_return: bool
    paired_trip_id: int | None
    status: TripStatus
    conditions: str
    guide: str
    date: str
    distance_km: int


class TripListResponse(BaseModel):
    trips: list[TripResponse]
    total: int


class CreatedResponse(BaseModel):
    id: int


class DrivingStateResponse(BaseModel):
    """Current driving state and the trip it refers to."""

    state: DrivingState
    current_trip: TripResponse | None
    ongoing_session_id: int | None
