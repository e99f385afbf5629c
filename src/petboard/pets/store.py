"""MongoDB-backed pet storage.

Created: 2026-10-18

Records live in the ``pets`` collection. ``get_pet_store()`` binds the store
to the collection once per live connection; later calls reuse the binding.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pymongo.errors import PyMongoError

from petboard.db.connection import ConnectionHandle
from petboard.errors import StoreError
from petboard.pets.models import Pet, PetFields

logger = logging.getLogger(__name__)

PET_COLLECTION = "pets"


class PetStore:
    """List and create pets in one collection."""

    def __init__(self, collection: Any):
        self._collection = collection

    @property
    def collection(self) -> Any:
        return self._collection

    async def list_all(self) -> list[Pet]:
        """Return every stored pet in the store's natural order."""
        try:
            docs = await self._collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error("Listing pets failed: %s", e)
            raise StoreError(str(e)) from e
        return [Pet.from_document(doc) for doc in docs]

    async def create(self, data: Mapping[str, Any]) -> Pet:
        """Validate and insert one pet.

        Raises:
            PetValidationError: invalid fields; nothing is written.
            StoreError: the insert failed.
        """
        fields = PetFields.parse(data)
        try:
            result = await self._collection.insert_one(fields.to_document())
        except PyMongoError as e:
            logger.error("Creating pet failed: %s", e)
            raise StoreError(str(e)) from e

        pet = Pet(id=str(result.inserted_id), **fields.model_dump())
        logger.info("Created pet %s (%s, owner %s)", pet.id, pet.name, pet.owner_name)
        return pet


# =========================================================================
# Factory Function
# =========================================================================

_store_instance: PetStore | None = None


def get_pet_store(handle: ConnectionHandle) -> PetStore:
    """Get or create the pet store bound to *handle*'s database.

    The binding is made once per live connection: a reconnect hands out a new
    database object and the store is rebound to it.
    """
    global _store_instance
    if _store_instance is None or _store_instance.collection.database is not handle.database:
        _store_instance = PetStore(handle.database[PET_COLLECTION])
        logger.debug("Bound pet store to %s.%s", handle.database_name, PET_COLLECTION)
    return _store_instance


def reset_pet_store() -> None:
    """Drop the store singleton (for testing)."""
    global _store_instance
    _store_instance = None
