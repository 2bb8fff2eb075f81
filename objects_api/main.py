"""FastAPI application entry point.

Package Objects API - object counts by type for indexed packages.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from objects_api.routes import api_router
from objects_api.schemas import error_body
from objects_api.settings import Settings, get_settings
from objects_api.stores.postgres import ObjectStore, open_store

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def _owned_store_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store on startup and close it on shutdown.

    A failed startup ping propagates, so the server refuses to start.
    """
    store = await open_store(app.state.settings)
    app.state.store = store
    try:
        yield
    finally:
        app.state.store = None
        await store.close()


def create_app(store: ObjectStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store: Store handle to serve from. The caller keeps ownership.
            When omitted, the application opens its own store on startup.
        settings: Settings to use instead of the environment.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Object counts by type for indexed packages",
        lifespan=None if store is not None else _owned_store_lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.store = store

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=error_body("INTERNAL_ERROR", "Internal server error"),
        )

    app.include_router(api_router)

    return app
