"""User settings management."""

from roadbook.core.logging import get_logger
from roadbook.domain.errors import ValidationFailedError
from roadbook.domain.result import Result
from roadbook.domain.user_settings import SUPPORTED_DATE_FORMATS, ThemeMode, UserSettings
from roadbook.domain.validation import TripValidator, TripValidatorIface
from roadbook.storage.interfaces import SettingsRepoIface

from .base import ensure_valid, run_use_case

logger = get_logger(__name__)


class UserSettingsService:
    """Read and update user preferences; every update is independent."""

    def __init__(
        self,
        repository: SettingsRepoIface,
        validator: TripValidatorIface | None = None,
    ):
        self.repository = repository
        self.validator = validator or TripValidator()

    async def get(self) -> Result[UserSettings]:
        return await run_use_case("get_settings", self.repository.get_settings)

    async def update_theme_mode(self, theme_mode: ThemeMode | str) -> Result[UserSettings]:
        async def action() -> UserSettings:
            try:
                mode = ThemeMode(theme_mode.upper() if isinstance(theme_mode, str) else theme_mode)
            except ValueError:
                raise ValidationFailedError(f"Unknown theme mode: {theme_mode}") from None
            await self.repository.update_theme_mode(mode)
            return await self.repository.get_settings()

        return await run_use_case("update_theme_mode", action)

    async def update_default_guide(self, guide: str) -> Result[UserSettings]:
        async def action() -> UserSettings:
            ensure_valid(self.validator.validate_guide(guide))
            await self.repository.update_default_guide(guide)
            return await self.repository.get_settings()

        return await run_use_case("update_default_guide", action, guide=guide)

    async def update_show_delete_confirmations(self, show: bool) -> Result[UserSettings]:
        async def action() -> UserSettings:
            await self.repository.update_show_delete_confirmations(show)
            return await self.repository.get_settings()

        return await run_use_case("update_show_delete_confirmations", action, show=show)

    async def update_date_format(self, date_format: str) -> Result[UserSettings]:
        async def action() -> UserSettings:
            if date_format not in SUPPORTED_DATE_FORMATS:
                raise ValidationFailedError(
                    f"Unsupported date format: {date_format} "
                    f"(expected one of {', '.join(SUPPORTED_DATE_FORMATS)})"
                )
            await self.repository.update_date_format(date_format)
            return await self.repository.get_settings()

        return await run_use_case("update_date_format", action, date_format=date_format)

    async def reset_to_defaults(self) -> Result[UserSettings]:
        async def action() -> UserSettings:
            await self.repository.reset_to_defaults()
            logger.info("Settings reset to defaults")
            return await self.repository.get_settings()

        return await run_use_case("reset_settings", action)
