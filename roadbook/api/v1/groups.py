"""Reporting group (seance) endpoints."""

from fastapi import APIRouter, HTTPException, status

from roadbook.api.errors import unwrap_or_raise
from roadbook.api.v1.trips import to_response
from roadbook.dependencies import TripRepoDep, TripUseCasesDep, UserSettingsServiceDep
from roadbook.domain.grouping import TripGroup
from roadbook.domain.user_settings import DEFAULT_USER_SETTINGS
from roadbook.schemas.group import (
    TripGroupListResponse,
    TripGroupResponse,
    TripStatsResponse,
)
from roadbook.services.overview import load_snapshot
from roadbook.util import format_date, format_duration

router = APIRouter(prefix="/groups", tags=["groups"])


def group_response(
    group: TripGroup, date_format: str = DEFAULT_USER_SETTINGS.date_format
) -> TripGroupResponse:
    return TripGroupResponse(
        seance_number=group.seance_number,
        outward=to_response(group.outward),
        return_trip=to_response(group.return_trip) if group.return_trip else None,
        total_kms=group.total_kms,
        has_return=group.has_return,
        is_complete=group.is_complete,
        display_date=format_date(group.outward.date, date_format),
        duration=format_duration(group.driven_ms),
    )


@router.get("", response_model=TripGroupListResponse, summary="List reporting groups")
async def list_groups(trips: TripRepoDep, settings_service: UserSettingsServiceDep):
    """Finished seances, most recent first, with aggregate statistics."""
    snapshot = await load_snapshot(trips)
    user_settings = unwrap_or_raise(await settings_service.get())
    stats = snapshot.stats
    return TripGroupListResponse(
        groups=[group_response(g, user_settings.date_format) for g in snapshot.groups],
        stats=TripStatsResponse(
            total_trips=stats.total_trips,
            total_km=stats.total_km,
            total_hours=stats.total_hours,
            average_km_per_trip=stats.average_km_per_trip,
        ),
    )


@router.delete(
    "/{outward_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a reporting group",
)
async def delete_group(outward_id: int, trips: TripRepoDep, use_cases: TripUseCasesDep):
    """Delete the outward trip and its return trip."""
    group = (await load_snapshot(trips)).find_group(outward_id)
    if group is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"kind": "not_found", "message": f"Group not found (id: {outward_id})"},
        )
    unwrap_or_raise(await use_cases.delete_trip_group(group))
