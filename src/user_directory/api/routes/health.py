"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from user_directory import __version__
from user_directory.api.dependencies import get_user_service
from user_directory.core.config import settings
from user_directory.domain.services.user_service import UserService

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Detailed health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    users: int


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Basic health check",
)
async def health_check() -> str:
    """
    Basic health check for load balancers.

    Always answers `OK` without touching the store.
    """
    return "OK"


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    service: UserService = Depends(get_user_service),
) -> HealthResponse:
    """Health check that also reports how many users are stored."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        users=await service.count(),
    )
