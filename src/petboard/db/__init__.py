"""MongoDB connection management."""

from petboard.db.connection import (
    ConnectionHandle,
    ConnectionManager,
    get_connection_manager,
    reset_connection_manager,
)

__all__ = [
    "ConnectionHandle",
    "ConnectionManager",
    "get_connection_manager",
    "reset_connection_manager",
]
