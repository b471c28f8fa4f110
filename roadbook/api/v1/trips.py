"""Trip lifecycle API endpoints."""

from fastapi import APIRouter, status

from roadbook.api.errors import unwrap_or_raise
from roadbook.dependencies import SessionPrefsDep, TripRepoDep, TripUseCasesDep
from roadbook.domain.trip import Trip
from roadbook.schemas.trip import (
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
from roadbook.services.overview import load_snapshot

router = APIRouter(prefix="/trips", tags=["trips"])


def to_response(trip: Trip) -> TripResponse:
    return TripResponse(**trip.model_dump(), distance_km=trip.distance_km)


@router.get("", response_model=TripListResponse, summary="List all trips")
async def list_trips(trips: TripRepoDep):
    """All recorded trips, most recent departure first."""
    collection = sorted(await trips.list_all(), key=lambda t: t.start_time, reverse=True)
    return TripListResponse(
        trips=[to_response(t) for t in collection], total=len(collection)
    )


@router.get("/state", response_model=DrivingStateResponse, summary="Current driving state")
async def get_driving_state(trips: TripRepoDep, session_prefs: SessionPrefsDep):
    snapshot = await load_snapshot(trips)
    current = snapshot.current_trip
    return DrivingStateResponse(
        state=snapshot.state,
        current_trip=to_response(current) if current else None,
        ongoing_session_id=await session_prefs.get_ongoing_session_id(),
    )


@router.post(
    "/outward",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start an outward trip",
)
async def start_outward(data: OutwardStart, use_cases: TripUseCasesDep):
    """
    Start a new outward trip.

    - **start_km**: departure odometer (0-999999)
    - **start_place**: departure place (2-100 characters)
    - **conditions**: optional driving conditions (max 200 characters)
    - **guide**: accompanying guide number (1-9)
    """
    result = await use_cases.start_outward(
        start_km=data.start_km,
        start_place=data.start_place,
        conditions=data.conditions,
        guide=data.guide,
    )
    return CreatedResponse(id=unwrap_or_raise(result))


@router.post(
    "/{trip_id}/finish-outward",
    response_model=TripResponse,
    summary="Finish the outward trip",
)
async def finish_outward(trip_id: int, data: OutwardFinish, use_cases: TripUseCasesDep):
    """
    Finish an outward trip.

    Responds 409 with both odometer values when the arrival reading is not
    above departure; retry with **allow_inconsistent_km** to accept it.
    """
    result = await use_cases.finish_outward(
        trip_id,
        end_km=data.end_km,
        end_place=data.end_place,
        allow_inconsistent_km=data.allow_inconsistent_km,
    )
    return to_response(unwrap_or_raise(result))


@router.post(
    "/{trip_id}/decide",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Prepare a return or close as simple trip",
)
async def decide_trip_type(
    trip_id: int, data: TripTypeDecision, use_cases: TripUseCasesDep
):
    result = await use_cases.decide_trip_type(trip_id, data.prepare_return)
    return CreatedResponse(id=unwrap_or_raise(result))


@router.post(
    "/{trip_id}/start-return", response_model=TripResponse, summary="Start the return trip"
)
async def start_return(trip_id: int, data: ReturnStart, use_cases: TripUseCasesDep):
    result = await use_cases.start_return(trip_id, data.actual_start_km)
    return to_response(unwrap_or_raise(result))


@router.post(
    "/{trip_id}/finish-return", response_model=TripResponse, summary="Finish the return trip"
)
async def finish_return(trip_id: int, data: ReturnFinish, use_cases: TripUseCasesDep):
    result = await use_cases.finish_return(
        trip_id, end_km=data.end_km, allow_inconsistent_km=data.allow_inconsistent_km
    )
    return to_response(unwrap_or_raise(result))


@router.post(
    "/{trip_id}/cancel-return", response_model=TripResponse, summary="Cancel the return trip"
)
async def cancel_return(trip_id: int, use_cases: TripUseCasesDep):
    result = await use_cases.cancel_return(trip_id)
    return to_response(unwrap_or_raise(result))


@router.patch("/{trip_id}/date", response_model=TripResponse, summary="Edit trip date")
async def edit_date(trip_id: int, data: DateEdit, use_cases: TripUseCasesDep):
    result = await use_cases.edit_trip.edit_date(trip_id, data.value)
    return to_response(unwrap_or_raise(result))


@router.patch(
    "/{trip_id}/conditions", response_model=TripResponse, summary="Edit driving conditions"
)
async def edit_conditions(trip_id: int, data: TextEdit, use_cases: TripUseCasesDep):
    result = await use_cases.edit_trip.edit_conditions(trip_id, data.value)
    return to_response(unwrap_or_raise(result))


@router.patch(
    "/{trip_id}/start-time", response_model=TripResponse, summary="Edit departure time"
)
async def edit_start_time(trip_id: int, data: TimestampEdit, use_cases: TripUseCasesDep):
    result = await use_cases.edit_trip.edit_start_time(trip_id, data.value)
    return to_response(unwrap_or_raise(result))


@router.patch("/{trip_id}/end-time", response_model=TripResponse, summary="Edit arrival time")
async def edit_end_time(trip_id: int, data: TimestampEdit, use_cases: TripUseCasesDep):
    result = await use_cases.edit_trip.edit_end_time(trip_id, data.value)
    return to_response(unwrap_or_raise(result))


@router.patch(
    "/{trip_id}/start-km", response_model=TripResponse, summary="Edit departure odometer"
)
async def edit_start_km(trip_id: int, data: KmEdit, use_cases: TripUseCasesDep):
    result = await use_cases.edit_trip.edit_start_km(trip_id, data.value)
    return to_response(unwrap_or_raise(result))


@router.patch("/{trip_id}/end-km", response_model=TripResponse, summary="Edit arrival odometer")
async def edit_end_km(trip_id: int, data: KmEdit, use_cases: TripUseCasesDep):
    result = await use_cases.edit_trip.edit_end_km(trip_id, data.value)
    return to_response(unwrap_or_raise(result))
