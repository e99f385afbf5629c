"""Process-wide MongoDB connection.

The first ``ensure_connection()`` call opens an async client and verifies it
with a ``ping``. The attempt is memoized as a single task: concurrent callers
await the same attempt, so only one client is ever opened. A failed attempt is
dropped so the next call starts over.

Usage:
    from petboard.db import get_connection_manager

    handle = await get_connection_manager().ensure_connection()
    pets = handle.database["pets"]
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pymongo import AsyncMongoClient
from pymongo.errors import ConfigurationError as MongoConfigurationError
from pymongo.errors import PyMongoError

from petboard.config import DEFAULT_DATABASE, Settings, get_settings
from petboard.errors import ConfigurationError, StoreConnectionError

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., Any]

_CREDENTIALS_RE = re.compile(r"//[^@/]+@")


def redact_uri(uri: str) -> str:
    """Hide the user:password part of a connection string."""
    return _CREDENTIALS_RE.sub("//***@", uri)


@dataclass(frozen=True)
class ConnectionHandle:
    """An open client plus the database the app works in."""

    client: Any
    database: Any

    @property
    def database_name(self) -> str:
        return self.database.name


class ConnectionManager:
    """Lazily opens and caches one MongoDB client."""

    def __init__(
        self,
        settings: Settings | None = None,
        client_factory: ClientFactory | None = None,
    ):
        self._settings = settings
        self._client_factory = client_factory or AsyncMongoClient
        self._handle: ConnectionHandle | None = None
        self._pending: asyncio.Task[ConnectionHandle] | None = None
        self._closers: set[asyncio.Future] = set()
        self.connect_attempts = 0

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def is_connected(self) -> bool:
        return self._handle is not None

    async def ensure_connection(self) -> ConnectionHandle:
        """Return the cached handle, connecting on first use.

        Raises:
            ConfigurationError: MONGODB_URI is missing or malformed.
            StoreConnectionError: the server could not be reached.
        """
        if self._handle is not None:
            return self._handle

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._connect())
            self._pending.add_done_callback(self._on_attempt_done)

        pending = self._pending
        # shield: a cancelled caller must not abort the attempt others await
        handle = await asyncio.shield(pending)
        if self._pending is not pending:
            # close() abandoned this attempt while it was in flight
            return await self.ensure_connection()

        self._handle = handle
        return handle

    def _on_attempt_done(self, task: asyncio.Task[ConnectionHandle]) -> None:
        if task.cancelled() or task.exception() is not None:
            if self._pending is task:
                self._pending = None

    def _close_abandoned(self, task: asyncio.Task[ConnectionHandle]) -> None:
        if task.cancelled() or task.exception() is not None:
            return
        closer = asyncio.ensure_future(task.result().client.close())
        self._closers.add(closer)
        closer.add_done_callback(self._closers.discard)

    async def _connect(self) -> ConnectionHandle:
        settings = self.settings
        uri = settings.require_mongodb_uri()
        self.connect_attempts += 1
        logger.info("Connecting to MongoDB at %s", redact_uri(uri))

        try:
            client = self._client_factory(
                uri,
                serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
                appname="petboard",
            )
        except MongoConfigurationError as e:
            raise ConfigurationError(f"Invalid MONGODB_URI: {e}") from e

        try:
            await client.admin.command("ping")
            if settings.mongodb_database:
                database = client.get_database(settings.mongodb_database)
            else:
                database = client.get_default_database(default=DEFAULT_DATABASE)
        except PyMongoError as e:
            logger.warning("MongoDB connection failed: %s", e)
            await client.close()
            raise StoreConnectionError(f"Could not connect to MongoDB: {e}") from e

        logger.info("Connected to MongoDB database '%s'", database.name)
        return ConnectionHandle(client=client, database=database)

    async def close(self) -> None:
        """Close the cached client. The next call reconnects.

        An attempt still in flight is abandoned; its client is closed as soon
        as it finishes connecting.
        """
        handle = self._handle
        pending = self._pending
        self._handle = None
        self._pending = None
        if pending is not None and handle is None:
            if pending.done():
                self._close_abandoned(pending)
            else:
                pending.add_done_callback(self._close_abandoned)
        if handle is not None:
            await handle.client.close()
            logger.info("MongoDB connection closed")


# =========================================================================
# Factory Function
# =========================================================================

_manager_instance: ConnectionManager | None = None


def get_connection_manager() -> ConnectionManager:
    """Get or create the process-wide connection manager."""
    global _manager_instance
    if _manager_instance is None:
        _manager_instance = ConnectionManager()
    return _manager_instance


def reset_connection_manager() -> None:
    """Drop the connection manager singleton (for testing)."""
    global _manager_instance
    _manager_instance = None
