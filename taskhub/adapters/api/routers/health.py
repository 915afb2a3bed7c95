# taskhub/adapters/api/routers/health.py
from typing import Dict

import structlog
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncEngine

from taskhub.adapters.api.dependencies import get_engine
from taskhub.adapters.persistence.database import ping

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])

@router.get("", status_code=status.HTTP_200_OK)
async def liveness_probe() -> Dict[str, str]:
    """
    Liveness Probe.
    Returns 200 OK while the process is serving requests.
    """
    return {"status": "ok"}

@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    engine: AsyncEngine = Depends(get_engine),
) -> Dict[str, str]:
    """
    Readiness Probe.
    Checks that a database connection can be acquired.
    Returns 503 Service Unavailable if the database is down.
    """
    if await ping(engine):
        return {"database": "up"}

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    logger.warning("readiness_probe_failed", component="database")
    return {"database": "down"}
