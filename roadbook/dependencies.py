"""
FastAPI dependencies for the logbook API.
Repositories live on application state; use cases are built per request.
"""

from typing import Annotated

from fastapi import Depends, Request

from roadbook.core.clock import Clock
from roadbook.core.settings import Settings
from roadbook.services import TripUseCases, UserSettingsService
from roadbook.storage.interfaces import SessionPrefsIface, SettingsRepoIface, TripRepoIface


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_trip_repo(request: Request) -> TripRepoIface:
    return request.app.state.trip_repo


def get_session_prefs(request: Request) -> SessionPrefsIface:
    return request.app.state.session_prefs


def get_settings_repo(request: Request) -> SettingsRepoIface:
    return request.app.state.settings_repo


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def get_trip_use_cases(
    trips: Annotated[TripRepoIface, Depends(get_trip_repo)],
    session_prefs: Annotated[SessionPrefsIface, Depends(get_session_prefs)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> TripUseCases:
    """
    Get trip use cases wired to the application repositories.

    Returns:
        TripUseCases sharing one validator and clock.
    """
    return TripUseCases.create(trips, session_prefs, clock=clock)


def get_user_settings_service(
    repository: Annotated[SettingsRepoIface, Depends(get_settings_repo)],
) -> UserSettingsService:
    return UserSettingsService(repository)


# Type aliases for dependency injection
AppSettingsDep = Annotated[Settings, Depends(get_app_settings)]
TripRepoDep = Annotated[TripRepoIface, Depends(get_trip_repo)]
SessionPrefsDep = Annotated[SessionPrefsIface, Depends(get_session_prefs)]
TripUseCasesDep = Annotated[TripUseCases, Depends(get_trip_use_cases)]
UserSettingsServiceDep = Annotated[UserSettingsService, Depends(get_user_settings_service)]
