"""Request and response schemas."""

from .error import ErrorDetail
from .group import TripGroupListResponse, TripGroupResponse, TripStatsResponse
from .settings import UserSettingsResponse, UserSettingsUpdate
from .trip import (
    CreatedResponse,
    DateEdit,
    DrivingStateResponse,
    KmEdit,
    OutwardFinish,
    OutwardStart,
    ReturnFinish,
    ReturnStart,
    TextEdit,
    TimestampEdit,
    TripListResponse,
    TripResponse,
    TripTypeDecision,
)

__all__ = [
    "ErrorDetail",
    "TripGroupListResponse",
    "TripGroupResponse",
    "TripStatsResponse",
    "UserSettingsResponse",
    "UserSettingsUpdate",
    "CreatedResponse",
    "DateEdit",
    "DrivingStateResponse",
    "KmEdit",
    "OutwardFinish",
    "OutwardStart",
    "ReturnFinish",
    "ReturnStart",
    "TextEdit",
    "TimestampEdit",
    "TripListResponse",
    "TripResponse",
    "TripTypeDecision",
]
