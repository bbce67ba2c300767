"""Health check API endpoints."""

import time

from fastapi import APIRouter, Depends, status

from ....core.config.config import Settings
from ....core.dependencies import get_settings
from ...schemas.common import HealthStatus

router = APIRouter()


@router.get("", response_model=HealthStatus, status_code=status.HTTP_200_OK)
async def basic_health_check(settings: Settings = Depends(get_settings)) -> HealthStatus:
    """Basic health check endpoint.

    Returns:
        Simple health status response
    """
    return HealthStatus(
        status="healthy",
        service="stock-api",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT.value,
        timestamp=time.time(),
    )
