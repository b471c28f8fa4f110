"""User preferences model."""

import enum

from pydantic import BaseModel, ConfigDict


class ThemeMode(str, enum.Enum):
    DYNAMIC = "DYNAMIC"
    LIGHT = "LIGHT"
    DARK = "DARK"


SUPPORTED_DATE_FORMATS = ("dd/MM/yyyy", "MM/dd/yyyy", "yyyy-MM-dd")


class UserSettings(BaseModel):
    """User preferences with their documented defaults."""

    model_config = ConfigDict(frozen=True)

    theme_mode: ThemeMode = ThemeMode.DYNAMIC
    default_guide: str = "1"
    show_delete_confirmations: bool = True
    date_format: str = "dd/MM/yyyy"


DEFAULT_USER_SETTINGS = UserSettings()
