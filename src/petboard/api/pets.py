# Pets router — list, create.
# Created: 2026-10-18
#
# POST takes a regular HTML form submission and redirects back to the page,
# so the browser re-fetches the list.

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from petboard.api.deps import error_response, open_pet_store
from petboard.api.schemas import ErrorEnvelope, PetListResponse
from petboard.errors import PetValidationError, StoreError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pets"])

PETS_PATH = "/pets"


@router.get(
    PETS_PATH,
    response_model=PetListResponse,
    responses={400: {"model": ErrorEnvelope}},
)
async def list_pets():
    """List every stored pet."""
    try:
        store = await open_pet_store()
        pets = await store.list_all()
    except StoreError as e:
        return error_response(e)

    return PetListResponse(data=pets)


@router.post(
    PETS_PATH,
    status_code=303,
    response_class=RedirectResponse,
    responses={400: {"model": ErrorEnvelope}},
)
async def create_pet(request: Request):
    """Create a pet from form fields ``name`` and ``owner_name``, then redirect to ``/``."""
    try:
        store = await open_pet_store()
        form = await request.form()
        # file parts are not pet fields
        data = {key: value for key, value in form.items() if isinstance(value, str)}
        await store.create(data)
    except (PetValidationError, StoreError) as e:
        logger.info("Rejected pet submission: %s", e)
        return error_response(e)

    # origin + "/" regardless of the Referer header
    return RedirectResponse(url=str(request.base_url), status_code=303)
