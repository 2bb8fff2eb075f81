"""FastAPI dependencies shared by routers."""

from fastapi import Request

from objects_api.settings import Settings
from objects_api.stores.postgres import ObjectStore


def get_store(request: Request) -> ObjectStore | None:
    """Store handle attached to the application, None if not configured."""
    return getattr(request.app.state, "store", None)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings
