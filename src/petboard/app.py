"""Petboard web application.

``create_app()`` builds the FastAPI app: the page at ``/``, the pets API at
``/pets`` (and ``/api/pets``), and ``/health``. Application errors that escape
a handler are rendered as ``{"success": false, "error": ...}``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from petboard import __version__
from petboard.api import mount_routers
from petboard.api.deps import error_response
from petboard.db.connection import get_connection_manager
from petboard.errors import PetboardError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await get_connection_manager().close()


async def petboard_error_handler(request: Request, exc: PetboardError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(exc)


def create_app() -> FastAPI:
    """Build the application."""
    app = FastAPI(
        title="Petboard",
        description="Register pets and their owners.",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_exception_handler(PetboardError, petboard_error_handler)
    mount_routers(app)
    return app


def run_server(host: str = "127.0.0.1", port: int = 3000, dev: bool = False) -> None:
    """Serve the app with uvicorn."""
    import uvicorn

    print("\n" + "=" * 50)
    print("\U0001f43e PETBOARD")
    print("=" * 50)
    print(f"\n\U0001f310 Open http://{'localhost' if host == '127.0.0.1' else host}:{port}\n")

    if dev:
        import pathlib

        src_dir = str(pathlib.Path(__file__).resolve().parent)
        uvicorn.run(
            "petboard.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py", "*.html"],
            log_level="debug",
        )
    else:
        uvicorn.run(create_app(), host=host, port=port)
