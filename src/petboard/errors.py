# Error taxonomy shared by the store layer and the HTTP handlers.
# Created: 2026-10-18
#
# Every error carries the HTTP status the app maps it to, so handlers and the
# app-level exception handler render the same {"success": false, "error": ...}
# envelope.

from __future__ import annotations


class PetboardError(Exception):
    """Base class for all application errors."""

    status_code: int = 400

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(PetboardError):
    """Required configuration is missing or invalid. Fatal."""

    status_code = 500


class StoreError(PetboardError):
    """The document store rejected or failed an operation."""


class StoreConnectionError(StoreError):
    """Could not establish a connection to the document store."""


class PetValidationError(PetboardError):
    """Submitted pet fields failed validation.

    ``errors`` maps each offending field to its human-readable message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        detail = ", ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(f"Pet validation failed: {detail}")
