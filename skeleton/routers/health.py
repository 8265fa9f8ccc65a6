"""Health check endpoints for monitoring."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from skeleton.config import Settings
from skeleton.dependencies import get_app_settings, get_clock, get_database
from skeleton.schemas.health import (
    ApiHealthReport,
    HealthFailure,
    HealthReport,
    ServicesHealth,
)
from skeleton.services.clock import isoformat
from skeleton.services.database import DatabaseProbe
from skeleton.services.storage import is_writable

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


def _unhealthy(clock: Callable[[], datetime], error: str) -> JSONResponse:
    logger.error("health_check_failed", error=error)
    body = HealthFailure(timestamp=isoformat(clock()), error=error)
    return JSONResponse(status_code=503, content=body.model_dump())


@router.get(
    "/health",
    response_model=HealthReport,
    responses={503: {"model": HealthFailure}},
)
def health_check(
    settings: Settings = Depends(get_app_settings),
    database: DatabaseProbe = Depends(get_database),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> HealthReport | JSONResponse:
    """Check the database connection and storage writability.

    The overall status only turns unhealthy when a check fails outright;
    an unwritable storage directory is reported per service but leaves
    the top-level status ``healthy``.
    """
    probe = database.get_connection()
    if not probe.ok:
        return _unhealthy(clock, probe.error or "database unavailable")

    try:
        storage_writable = is_writable(settings.storage_path)
    except Exception as exc:
        return _unhealthy(clock, str(exc))

    # Cache is not probed.
    return HealthReport(
        status="healthy",
        timestamp=isoformat(clock()),
        services=ServicesHealth(
            database="healthy",
            storage="healthy" if storage_writable else "unhealthy",
            cache="healthy",
        ),
        version=settings.app_version,
        environment=settings.environment,
    )


@router.get("/api/health", response_model=ApiHealthReport)
async def api_health_check(
    clock: Callable[[], datetime] = Depends(get_clock),
) -> ApiHealthReport:
    """API-scoped health check, always healthy."""
    return ApiHealthReport(timestamp=isoformat(clock()))
