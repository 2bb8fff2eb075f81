"""Health endpoint.

GET /health - process liveness plus database reachability.

The endpoint answers 200 whenever the process is up. Only the `db` field
reflects the database, so orchestrators can tell "process alive" apart from
"dependency degraded".
"""

import logging

from fastapi import APIRouter, Depends

from objects_api.deps import get_app_settings, get_store
from objects_api.schemas import HealthResponse
from objects_api.settings import Settings
from objects_api.stores.postgres import ObjectStore

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: ObjectStore | None = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Health check endpoint."""
    if store is None:
        return HealthResponse(db="unavailable")

    try:
        await store.ping(timeout=settings.health_timeout)
    except Exception as e:
        logger.warning(f"Health ping failed: {e}")
        return HealthResponse(db="unavailable")

    return HealthResponse(db="ok")
