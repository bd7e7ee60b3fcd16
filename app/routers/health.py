"""Health check endpoint.

Returns service status including store and cache connectivity.  The store
is required (503 when unreachable); the cache is optional, so losing it
only marks the service ``degraded``.
"""

import logging
from typing import Any

from fastapi import APIRouter
from starlette.responses import JSONResponse

from app.core.config import settings
from app.core.constants import SERVICE_NAME, SERVICE_VERSION, TABLE_PROFILES
from app.db.redis import get_redis
from app.db.supabase import get_supabase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
def health_check() -> Any:
    """Return health status with a real query against each backend."""
    db_status = "disconnected"
    cache_status = "disconnected"

    try:
        client = get_supabase()
        result = client.table(TABLE_PROFILES).select("id").limit(1).execute()
        if result is not None:
            db_status = "connected"
    except Exception:
        logger.warning("Health check: Supabase connection failed", exc_info=True)

    try:
        if get_redis().ping():
            cache_status = "connected"
    except Exception:
        logger.warning("Health check: Redis connection failed", exc_info=True)

    healthy = db_status == "connected" and cache_status == "connected"
    payload: dict[str, str] = {
        "status": "ok" if healthy else "degraded",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": db_status,
        "cache": cache_status,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
