"""PostgreSQL store with async SQLAlchemy.

Handles:
- Engine (connection pool) lifecycle
- Connectivity checks with a caller-supplied timeout
- Object type aggregation per package

Every call is a single attempt. Failures surface as StoreError, timeouts as
StoreTimeoutError, and the caller decides what to do with them.
"""

import asyncio
import logging
from typing import Protocol

from sqlalchemy import Select, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from objects_api.models import SuiObject
from objects_api.schemas import ObjectTypeCount
from objects_api.settings import Settings

logger = logging.getLogger("uvicorn.error")


class StoreError(RuntimeError):
    """Backing store failed to answer."""


class StoreTimeoutError(StoreError):
    """Backing store did not answer before the deadline."""


class ObjectStore(Protocol):
    """Capabilities the HTTP layer needs from the backing store."""

    async def ping(self, timeout: float) -> None: ...

    async def count_object_types(self, package_id: str, timeout: float) -> list[ObjectTypeCount]: ...

    async def close(self) -> None: ...


def package_prefix(package_id: str) -> str:
    """Object type prefix owned by a package, e.g. '0x2::'."""
    return f"{package_id}::"


def count_object_types_query(package_id: str) -> Select:
    """Build the per-type count query for a package.

    LIKE wildcards inside the package id are escaped, so only the literal
    '<package_id>::' prefix matches.
    """
    return (
        select(SuiObject.object_type, func.count().label("count"))
        .where(SuiObject.object_type.startswith(package_prefix(package_id), autoescape=True))
        .group_by(SuiObject.object_type)
    )


class PostgresObjectStore:
    """ObjectStore backed by an async SQLAlchemy engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def ping(self, timeout: float) -> None:
        """Run a trivial round trip to the database.

        Raises:
            StoreTimeoutError: If no answer within `timeout` seconds.
            StoreError: On connection loss or database failure.
        """
        await self._run(self._ping(), timeout, operation="ping")

    async def count_object_types(self, package_id: str, timeout: float) -> list[ObjectTypeCount]:
        """Count stored objects per type for a package.

        Args:
            package_id: Package identifier, e.g. "0x2".
            timeout: Deadline for the query in seconds.

        Returns:
            Counts sorted ascending by object type. Empty if nothing matches.

        Raises:
            ValueError: If package_id is blank.
            StoreTimeoutError: If no answer within `timeout` seconds.
            StoreError: On connection loss or database failure.
        """
        if not package_id or not package_id.strip():
            raise ValueError("package_id must not be empty")

        rows = await self._run(self._count(package_id), timeout, operation="count_object_types")
        counts = [ObjectTypeCount(object_type=object_type, count=count) for object_type, count in rows]
        # Python ordering, not the database collation.
        counts.sort(key=lambda c: c.object_type)
        return counts

    async def close(self) -> None:
        """Dispose the connection pool."""
        await self._engine.dispose()

    async def _ping(self) -> None:
        async with self._engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def _count(self, package_id: str) -> list[tuple[str, int]]:
        async with self._engine.connect() as conn:
            result = await conn.execute(count_object_types_query(package_id))
            return [(row[0], int(row[1])) for row in result.all()]

    async def _run(self, coro, timeout: float, *, operation: str):
        try:
            return await asyncio.wait_for(coro, timeout=timeout)
        except asyncio.TimeoutError as e:
            raise StoreTimeoutError(f"{operation} timed out after {timeout}s") from e
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(f"{operation} failed: {e}") from e


def create_store(settings: Settings) -> PostgresObjectStore:
    """Create a store with its own connection pool. No I/O happens here."""
    engine = create_async_engine(
        settings.async_database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )
    return PostgresObjectStore(engine)


async def open_store(settings: Settings) -> PostgresObjectStore:
    """Create a store and verify the database answers.

    Raises:
        StoreError: If DATABASE_URL cannot be turned into an engine (bad URL,
            unknown dialect, missing driver), or the startup ping fails. The
            pool is disposed first.
    """
    try:
        store = create_store(settings)
    except (SQLAlchemyError, ImportError) as e:
        raise StoreError(f"invalid DATABASE_URL: {e}") from e

    try:
        await store.ping(timeout=settings.startup_ping_timeout)
    except StoreError:
        await store.close()
        raise
    logger.info("Postgres connected")
    return store
