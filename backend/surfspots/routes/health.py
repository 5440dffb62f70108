"""
Surf Spots Backend - Health Check Route
=========================================

What:  Health check endpoint for monitoring and container runtimes.
How:   Loads and decodes the backing document; reports status and record count.

Status levels:
    - healthy:   document readable and valid (HTTP 200)
    - unhealthy: document missing, unreadable or corrupt (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from surfspots import __version__
from surfspots.dependencies import get_spot_service
from surfspots.exceptions import SurfSpotsError
from surfspots.schemas.spot import HealthResponse
from surfspots.services.spot_service import SpotService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Backing document unavailable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    service: SpotService = Depends(get_spot_service),
) -> HealthResponse:
    storage_status = "available"
    overall = "healthy"
    record_count = None

    try:
        collection = await service.persistence.load()
        record_count = len(collection.records)
    except SurfSpotsError as e:
        storage_status = "unavailable"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: storage unavailable: %s", e.message)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        record_count=record_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
