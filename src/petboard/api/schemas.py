# API response schemas.
# Created: 2026-10-18

from __future__ import annotations

from pydantic import BaseModel

from petboard.pets.models import Pet


class APIResponse(BaseModel):
    """Base response wrapper."""

    model_config = {"from_attributes": True}


class ErrorEnvelope(APIResponse):
    """Standard error envelope."""

    success: bool = False
    error: str


class PetListResponse(APIResponse):
    """All stored pets."""

    success: bool = True
    data: list[Pet]


class HealthStatus(APIResponse):
    """Store reachability."""

    status: str = "ok"
    database: str | None = None
    error: str | None = None
