"""API routes."""

from fastapi import APIRouter

from objects_api.routes import health, packages

api_router = APIRouter()

# Liveness + database reachability
api_router.include_router(health.router, tags=["health"])

# Object counts per package
api_router.include_router(packages.router, tags=["packages"])
