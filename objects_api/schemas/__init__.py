"""Pydantic schemas for API request/response validation."""

from objects_api.schemas.common import ErrorDetail, ErrorResponse, error_body
from objects_api.schemas.health import HealthResponse
from objects_api.schemas.objects import ObjectTypeCount, PackageObjectsResponse

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "error_body",
    "HealthResponse",
    "ObjectTypeCount",
    "PackageObjectsResponse",
]
