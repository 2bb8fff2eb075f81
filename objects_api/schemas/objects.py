"""Schemas for the package objects endpoint (/packages/{package_id}/objects)."""

from pydantic import BaseModel, Field


class ObjectTypeCount(BaseModel):
    """Number of stored objects of one exact type."""

    object_type: str
    count: int = Field(ge=0)


class PackageObjectsResponse(BaseModel):
    """Object counts by type for a package."""

    package_id: str
    types: list[ObjectTypeCount] = Field(default_factory=list)
