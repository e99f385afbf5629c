# Health router — store reachability.
# Created: 2026-10-18

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from petboard.api.schemas import HealthStatus
from petboard.db.connection import get_connection_manager
from petboard.errors import PetboardError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthStatus,
    response_model_exclude_none=True,
    responses={503: {"model": HealthStatus}},
)
async def get_health():
    """Ping the store over the shared connection."""
    try:
        handle = await get_connection_manager().ensure_connection()
        await handle.client.admin.command("ping")
    except (PetboardError, PyMongoError) as e:
        logger.warning("Health check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content=HealthStatus(status="error", error=str(e)).model_dump(exclude_none=True),
        )

    return HealthStatus(database=handle.database_name)
