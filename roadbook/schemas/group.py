"""Pydantic schemas for reporting groups."""

from pydantic import BaseModel

from .trip import TripResponse


class TripGroupResponse(BaseModel):
    seance_number: int
    outward: TripResponse
    return_trip: TripResponse | None
    total_kms: int
    has_return: bool
    is_complete: bool
    display_date: str
    duration: str


class TripStatsResponse(BaseModel):
    total_trips: int
    total_km: int
    total_hours: float
    average_km_per_trip: float


class TripGroupListResponse(BaseModel):
    groups: list[TripGroupResponse]
    stats: TripStatsResponse
