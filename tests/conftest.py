import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult

from hotel.api.dependencies import get_database_manager, get_db
from hotel.api.main import app


def _matches(document, query):
    return all(document.get(key) == value for key, value in (query or {}).items())


class StubCursor:
    def __init__(self, documents, error=None):
        self._documents = documents
        self._error = error

    async def to_list(self, length=None):
        if self._error is not None:
            raise self._error
        documents = [copy.deepcopy(doc) for doc in self._documents]
        return documents if length is None else documents[:length]


class StubCollection:
    """In-memory stand-in for the motor collection calls the handlers make."""

    def __init__(self, unique=()):
        self.documents = []
        self.unique = unique
        self.error = None

    def _raise_if_failing(self):
        if self.error is not None:
            raise self.error

    def _find(self, query):
        return next((doc for doc in self.documents if _matches(doc, query)), None)

    async def insert_one(self, document):
        self._raise_if_failing()
        for key in self.unique:
            if any(doc.get(key) == document.get(key) for doc in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error dup key: {{ {key}: {document.get(key)!r} }}", 11000)
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    def find(self, query=None):
        return StubCursor([doc for doc in self.documents if _matches(doc, query)], self.error)

    async def find_one(self, query):
        self._raise_if_failing()
        document = self._find(query)
        return copy.deepcopy(document)

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        self._raise_if_failing()
        document = self._find(query)
        if document is None:
            return None
        before = copy.deepcopy(document)
        document.update(update["$set"])
        return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, query):
        self._raise_if_failing()
        document = self._find(query)
        if document is not None:
            self.documents.remove(document)
        return document


class StubDatabase:
    def __init__(self):
        self.collections = {"people": StubCollection(unique=("email",)), "menuitems": StubCollection()}
        self.ping_error = None

    def __getitem__(self, name):
        return self.collections.setdefault(name, StubCollection())

    async def command(self, name):
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1.0}


@pytest.fixture
def db():
    return StubDatabase()


@pytest.fixture
def client(db):
    async def override_get_db():
        return db

    async def override_get_database_manager():
        return SimpleNamespace(database=db)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_database_manager] = override_get_database_manager
    # Not entered as a context manager so the lifespan never dials MongoDB.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def chef_payload():
    return {
        "name": "Alice",
        "age": 31,
        "work": "chef",
        "mobile": 9876543210,
        "email": "alice@example.com",
        "address": "12 Market Street",
    }


@pytest.fixture
def dish_payload():
    return {"name": "Paneer Tikka", "price": 249.5, "taste": "spicy"}
