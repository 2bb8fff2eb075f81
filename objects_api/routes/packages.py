"""Package object endpoints.

GET /packages/{package_id}/objects - object counts by type for a package.

Status mapping:
- 400: blank package id
- 503: no store configured
- 408: query timed out
- 500: any other store failure (no internal detail in the body)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from objects_api.deps import get_app_settings, get_store
from objects_api.schemas import PackageObjectsResponse, error_body
from objects_api.settings import Settings
from objects_api.stores.postgres import ObjectStore, StoreError, StoreTimeoutError

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _invalid_package_id() -> HTTPException:
    return HTTPException(
        status_code=400,
        detail=error_body("INVALID_PACKAGE_ID", "package_id is required"),
    )


@router.get("/packages//objects", include_in_schema=False)
async def get_package_objects_missing_id() -> None:
    """Empty path segment in place of the package id."""
    raise _invalid_package_id()


@router.get("/packages/{package_id}/objects", response_model=PackageObjectsResponse)
async def get_package_objects(
    package_id: str,
    store: ObjectStore | None = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> PackageObjectsResponse:
    """Count stored objects per type for a package.

    Args:
        package_id: Package identifier, echoed back unchanged.

    Returns:
        PackageObjectsResponse with types sorted by object_type.

    Raises:
        HTTPException 400: If package_id is blank.
        HTTPException 503: If no store is configured.
        HTTPException 408: If the query times out.
        HTTPException 500: If the store fails otherwise.
    """
    if not package_id.strip():
        raise _invalid_package_id()

    if store is None:
        raise HTTPException(
            status_code=503,
            detail=error_body("STORE_UNAVAILABLE", "Database is not configured"),
        )

    try:
        types = await store.count_object_types(package_id, timeout=settings.query_timeout)
    except StoreTimeoutError:
        logger.warning(f"Object type count timed out for package {package_id}")
        raise HTTPException(
            status_code=408,
            detail=error_body(
                "QUERY_TIMEOUT",
                "Query timed out",
                {"package_id": package_id},
            ),
        )
    except StoreError:
        logger.exception(f"Object type count failed for package {package_id}")
        raise HTTPException(
            status_code=500,
            detail=error_body("INTERNAL_ERROR", "Internal server error"),
        )

    return PackageObjectsResponse(package_id=package_id, types=types)
