"""Server-rendered pages."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from petboard.api.deps import open_pet_store
from petboard.api.pets import PETS_PATH

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request):
    """Render the submission form and the current list of pets.

    Store errors propagate to the app-level error handler.
    """
    store = await open_pet_store()
    pets = await store.list_all()

    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": "Pet App", "pets": pets, "create_url": PETS_PATH},
    )
