"""Liveness and readiness probes."""
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from wallet_service import __version__
from wallet_service.core.config import get_settings
from wallet_service.infrastructure.database import ping_database
from wallet_service.schemas import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse, summary="Liveness probe")
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", service=get_settings().project_name, version=__version__)


@router.get("/ready", summary="Readiness probe, includes database connectivity")
async def readiness_check():
    if not await ping_database():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
