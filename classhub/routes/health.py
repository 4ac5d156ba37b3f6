"""
ClassHub Backend - Health Check Route
======================================

GET /health answers 200 "healthy" when the store accepts a `SELECT 1`, and
503 "unhealthy" when it does not. Container probes and uptime monitors poll
it, so it is left out of the access log.
"""

import logging
import time

from fastapi import APIRouter, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from classhub import __version__, database
from classhub.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_booted_at = time.monotonic()


async def store_reachable() -> bool:
    # Looked up on the module so tests can swap the engine
    try:
        async with database.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check: store unreachable: %s", e)
        return False
    return True


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(response: Response) -> HealthResponse:
    reachable = await store_reachable()
    if not reachable:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if reachable else "unhealthy",
        version=__version__,
        database="connected" if reachable else "disconnected",
        uptime_seconds=round(time.monotonic() - _booted_at, 2),
    )
