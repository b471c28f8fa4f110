"""User settings endpoints."""

from fastapi import APIRouter

from roadbook.api.errors import unwrap_or_raise
from roadbook.dependencies import UserSettingsServiceDep
from roadbook.domain.user_settings import UserSettings
from roadbook.schemas.settings import UserSettingsResponse, UserSettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])


def settings_response(settings: UserSettings) -> UserSettingsResponse:
    return UserSettingsResponse.model_validate(settings.model_dump())


@router.get("", response_model=UserSettingsResponse, summary="Get user settings")
async def get_user_settings(service: UserSettingsServiceDep):
    return settings_response(unwrap_or_raise(await service.get()))


@router.patch("", response_model=UserSettingsResponse, summary="Update user settings")
async def update_user_settings(data: UserSettingsUpdate, service: UserSettingsServiceDep):
    """Apply each provided field; the first rejected field aborts the rest."""
    if data.theme_mode is not None:
        unwrap_or_raise(await service.update_theme_mode(data.theme_mode))
    if data.default_guide is not None:
        unwrap_or_raise(await service.update_default_guide(data.default_guide))
    if data.show_delete_confirmations is not None:
        unwrap_or_raise(
            await service.update_show_delete_confirmations(data.show_delete_confirmations)
        )
    if data.date_format is not None:
        unwrap_or_raise(await service.update_date_format(data.date_format))

    return settings_response(unwrap_or_raise(await service.get()))


@router.post("/reset", response_model=UserSettingsResponse, summary="Reset user settings")
async def reset_user_settings(service: UserSettingsServiceDep):
    return settings_response(unwrap_or_raise(await service.reset_to_defaults()))
