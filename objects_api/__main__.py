"""Process bootstrap: `python -m objects_api` or the `objects-api` script.

Startup order:
1. Load settings (DATABASE_URL required, PORT defaults to 8080)
2. Open the store and ping it once; refuse to start if it is unreachable
3. Bind the listening socket; a bind failure is fatal
4. Serve until shutdown, then dispose the store

Every startup failure is logged and exits with status 1.
"""

import asyncio
import logging
import socket
import sys

import uvicorn
from pydantic import ValidationError

from objects_api.main import create_app
from objects_api.settings import Settings, get_settings
from objects_api.stores.postgres import StoreError, open_store

logger = logging.getLogger("uvicorn.error")

STARTUP_FAILURE = 1


class StartupError(RuntimeError):
    """The server could not start serving."""


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listening socket up front so bind errors surface here."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


async def serve(settings: Settings) -> None:
    """Open the store, bind, and serve until shutdown."""
    try:
        store = await open_store(settings)
    except StoreError as e:
        raise StartupError(f"database unreachable at startup: {e}") from e

    try:
        try:
            sock = bind_socket(settings.host, settings.port)
        except OSError as e:
            raise StartupError(f"failed to bind {settings.host}:{settings.port}: {e}") from e

        config = uvicorn.Config(
            create_app(store=store, settings=settings),
            log_level="debug" if settings.debug else "info",
        )
        server = uvicorn.Server(config)
        try:
            await server.serve(sockets=[sock])
        finally:
            sock.close()

        if not server.started:
            raise StartupError("server failed to start")
    finally:
        await store.close()


def main() -> None:
    """Run the service; exit with status 1 on any startup failure."""
    logging.basicConfig(level=logging.INFO)

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration (is DATABASE_URL set?): {e}")
        sys.exit(STARTUP_FAILURE)

    try:
        asyncio.run(serve(settings))
    except StartupError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
