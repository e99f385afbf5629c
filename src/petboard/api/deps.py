# Shared helpers for the HTTP handlers.
# Created: 2026-10-18

from __future__ import annotations

from fastapi.responses import JSONResponse

from petboard.api.schemas import ErrorEnvelope
from petboard.db.connection import get_connection_manager
from petboard.errors import PetboardError
from petboard.pets.store import PetStore, get_pet_store


async def open_pet_store() -> PetStore:
    """Ensure the store connection is up and return the bound pet store.

    Raises:
        ConfigurationError: MONGODB_URI is not configured.
        StoreConnectionError: the store is unreachable.
    """
    handle = await get_connection_manager().ensure_connection()
    return get_pet_store(handle)


def error_response(exc: PetboardError) -> JSONResponse:
    """Render *exc* as ``{"success": false, "error": ...}`` with its status."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorEnvelope(error=exc.message).model_dump(),
    )
