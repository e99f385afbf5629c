# Shared fixtures: an in-memory stand-in for the async MongoDB client.
# Created: 2026-10-18

import asyncio
from dataclasses import dataclass, field
from urllib.parse import urlparse

import pytest
from bson import ObjectId
from pymongo.errors import InvalidOperation

import petboard.db.connection as connection_module
from petboard.config import Settings
from petboard.db.connection import ConnectionManager, reset_connection_manager
from petboard.pets.store import reset_pet_store

TEST_URI = "mongodb://localhost:27017/petboard_test"


@dataclass
class FakeInsertResult:
    inserted_id: ObjectId


@dataclass
class CollectionState:
    """Documents and injected failure shared by every client's view of a collection."""

    documents: list[dict] = field(default_factory=list)
    error: Exception | None = None


class FakeCursor:
    def __init__(self, docs, error=None):
        self._docs = docs
        self._error = error

    async def to_list(self, length=None):
        if self._error is not None:
            raise self._error
        return list(self._docs if length is None else self._docs[:length])


class FakeCollection:
    def __init__(self, name, database, state):
        self.name = name
        self.database = database
        self._state = state

    @property
    def documents(self) -> list[dict]:
        return self._state.documents

    @property
    def error(self) -> Exception | None:
        return self._state.error

    @error.setter
    def error(self, value):
        self._state.error = value

    def _check_open(self):
        client = self.database.client
        if client is not None and client.closed:
            raise InvalidOperation("Cannot use AsyncMongoClient after close")

    def find(self, filter=None):
        self._check_open()
        return FakeCursor([dict(d) for d in self.documents], error=self.error)

    async def insert_one(self, document):
        self._check_open()
        if self.error is not None:
            raise self.error
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return FakeInsertResult(document["_id"])


class FakeDatabase:
    def __init__(self, name, client, states):
        self.name = name
        self.client = client
        self._states = states
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name):
        if name not in self._collections:
            state = self._states.setdefault((self.name, name), CollectionState())
            self._collections[name] = FakeCollection(name, self, state)
        return self._collections[name]


class FakeAdmin:
    def __init__(self, client):
        self._client = client

    async def command(self, name):
        self._client.commands.append(name)
        # yield so concurrent callers interleave
        await asyncio.sleep(0)
        if self._client.ping_error is not None:
            raise self._client.ping_error
        return {"ok": 1.0}


class FakeMongoClient:
    def __init__(self, uri, options, states, ping_error=None):
        self.uri = uri
        self.options = options
        self.commands: list[str] = []
        self.ping_error = ping_error
        self.closed = False
        self.admin = FakeAdmin(self)
        self._states = states
        self._databases: dict[str, FakeDatabase] = {}

    def get_database(self, name):
        return self._databases.setdefault(name, FakeDatabase(name, self, self._states))

    def get_default_database(self, default=None):
        name = urlparse(self.uri).path.lstrip("/") or default
        return self.get_database(name)

    async def close(self):
        self.closed = True


class FakeClientFactory:
    """Callable used in place of AsyncMongoClient.

    Each client hands out its own database and collection objects, which stop
    working once that client is closed. Stored documents survive reconnects.
    """

    def __init__(self):
        self.clients: list[FakeMongoClient] = []
        self.states: dict[tuple[str, str], CollectionState] = {}
        self.ping_errors: list[Exception] = []

    def __call__(self, uri, **options):
        ping_error = self.ping_errors.pop(0) if self.ping_errors else None
        client = FakeMongoClient(uri, options, self.states, ping_error=ping_error)
        self.clients.append(client)
        return client

    def collection(self, name="pets", database="petboard_test"):
        """A client-independent view of a collection, for seeding and inspection."""
        return FakeDatabase(database, None, self.states)[name]


@pytest.fixture
def settings():
    return Settings(_env_file=None, mongodb_uri=TEST_URI, mongodb_database=None)


@pytest.fixture
def mongo_factory():
    return FakeClientFactory()


@pytest.fixture
def manager(settings, mongo_factory, monkeypatch):
    """Install a connection manager backed by the fake client as the singleton."""
    reset_connection_manager()
    reset_pet_store()
    mgr = ConnectionManager(settings=settings, client_factory=mongo_factory)
    monkeypatch.setattr(connection_module, "_manager_instance", mgr)
    yield mgr
    reset_pet_store()
    reset_connection_manager()


@pytest.fixture
def pets_collection(mongo_factory):
    return mongo_factory.collection()
