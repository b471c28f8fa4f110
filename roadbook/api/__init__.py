"""API package initialization."""

from fastapi import APIRouter

from roadbook.api.health import router as health_router
from roadbook.api.metrics import router as metrics_router
from roadbook.api.v1 import v1_router

# Create main API router
api_router = APIRouter(prefix="/api")

# Include version routers
api_router.include_router(v1_router)

# Operational endpoints (no /api prefix)
ops_router = APIRouter()
ops_router.include_router(health_router)
ops_router.include_router(metrics_router)
