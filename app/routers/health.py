"""Liveness and health check endpoints.

``GET /`` answers without touching any dependency; ``GET /health`` also
probes the candidates table and returns 503 when Supabase is unreachable.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse, PlainTextResponse

from app.core.config import Settings
from app.db.supabase import get_supabase
from app.routers.deps import get_app_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Backend is running!"


@router.get("/health")
def health_check(settings: Settings = Depends(get_app_settings)) -> Any:  # noqa: B008
    """Return health status including a real Supabase connectivity test.

    Returns 200 OK when healthy, 503 when the database is down.
    """
    db_status = "disconnected"

    try:
        client = get_supabase(settings)
        result = client.table(settings.CANDIDATES_TABLE).select("id").limit(1).execute()
        if result is not None:
            db_status = "connected"
    except Exception:
        logger.warning("Health check: Supabase connection failed", exc_info=True)

    payload: dict[str, str] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
