"""Pet model and storage."""

from petboard.pets.models import MAX_FIELD_LENGTH, Pet, PetFields
from petboard.pets.store import PetStore, get_pet_store, reset_pet_store

__all__ = [
    "MAX_FIELD_LENGTH",
    "Pet",
    "PetFields",
    "PetStore",
    "get_pet_store",
    "reset_pet_store",
]
