"""Pet data model.

Created: 2026-10-18

``PetFields`` is what a client submits; ``Pet`` is a stored record with the
id the store assigned. Both fields are required and capped at 60 characters.
Validation failures are raised as ``PetValidationError`` with one message per
offending field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from petboard.errors import PetValidationError

MAX_FIELD_LENGTH = 60

# field -> (missing/empty message, too-long message)
FIELD_MESSAGES: dict[str, tuple[str, str]] = {
    "name": (
        "Please provide a name for this pet.",
        f"Name cannot be more than {MAX_FIELD_LENGTH} characters",
    ),
    "owner_name": (
        "Please provide the pet owner's name",
        f"Owner's Name cannot be more than {MAX_FIELD_LENGTH} characters",
    ),
}


class PetFields(BaseModel):
    """Fields accepted when creating a pet. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=MAX_FIELD_LENGTH)
    owner_name: str = Field(..., min_length=1, max_length=MAX_FIELD_LENGTH)

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> PetFields:
        """Validate submitted data.

        Raises:
            PetValidationError: a field is missing, empty or too long.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise PetValidationError(_field_errors(e)) from e

    def to_document(self) -> dict[str, Any]:
        return self.model_dump()


class Pet(BaseModel):
    """A stored pet."""

    id: str
    name: str
    owner_name: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Pet:
        """Build from a raw store document, stringifying its ``_id``."""
        return cls(
            id=str(doc["_id"]),
            name=doc.get("name", ""),
            owner_name=doc.get("owner_name", ""),
        )


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        if not err["loc"]:
            continue
        field = str(err["loc"][0])
        if field in errors or field not in FIELD_MESSAGES:
            continue
        required_msg, too_long_msg = FIELD_MESSAGES[field]
        errors[field] = too_long_msg if err["type"] == "string_too_long" else required_msg
    return errors
