"""Pydantic schemas for user settings."""

from pydantic import BaseModel, ConfigDict

from roadbook.domain.user_settings import ThemeMode


class UserSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    theme_mode: ThemeMode
    default_guide: str
    show_delete_confirmations: bool
    date_format: str


class UserSettingsUpdate(BaseModel):
    """Partial update; only the provided fields are written."""

    theme_mode: str | None = None
    default_guide: str | None = None
    show_delete_confirmations: bool | None = None
    date_format: str | None = None
