# Router aggregation.
# Created: 2026-10-18
#
# mount_routers(app) registers every router at the site root. The pets router
# is also mounted under /api, the path older clients post to.

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

# (module_path, attr_name, extra prefixes)
_ROUTERS: list[tuple[str, str, tuple[str, ...]]] = [
    ("petboard.web.pages", "router", ()),
    ("petboard.api.pets", "router", ("/api",)),
    ("petboard.api.health", "router", ()),
]


def mount_routers(app: FastAPI) -> None:
    """Mount all routers on *app*."""
    for module_path, attr_name, aliases in _ROUTERS:
        mod = importlib.import_module(module_path)
        router = getattr(mod, attr_name)

        app.include_router(router)
        for prefix in aliases:
            app.include_router(router, prefix=prefix, include_in_schema=False)

        logger.debug("Mounted router: %s", module_path)
