"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from roadbook.core.logging import get_logger
from roadbook.core.metrics import health_ready_checks_total

router = APIRouter()

logger = get_logger(__name__)


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Health check endpoint for liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
async def health_ready(request: Request) -> dict[str, Any]:
    """Health check endpoint for readiness probe."""
    if not await _check_database(request):
        health_ready_checks_total.labels(result="fail", reason="database").inc()
        raise HTTPException(
            status_code=503,
            detail={"status": "unready", "errors": ["database_connection_failed"]},
        )

    health_ready_checks_total.labels(result="ok", reason="database").inc()
    return {"status": "ready"}


async def _check_database(request: Request) -> bool:
    """Check database connectivity."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return False

    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.fetchone()
        return True

    except SQLAlchemyError as e:
        logger.warning("Database readiness check failed", error=str(e))
        return False
