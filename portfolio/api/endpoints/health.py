"""Liveness endpoint."""
import time
from datetime import datetime, timezone

from fastapi import APIRouter, status

from portfolio.models.health import HealthResponse

router = APIRouter()

PROCESS_STARTED_AT = time.monotonic()


@router.get(
    "/api/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        uptime=time.monotonic() - PROCESS_STARTED_AT,
    )
