"""API v1 router configuration."""

from fastapi import APIRouter

from roadbook.api.v1.groups import router as groups_router
from roadbook.api.v1.settings import router as settings_router
from roadbook.api.v1.trips import router as trips_router

# Create main v1 router
v1_router = APIRouter(prefix="/v1")

# Include sub-routers
v1_router.include_router(trips_router)
v1_router.include_router(groups_router)
v1_router.include_router(settings_router)
