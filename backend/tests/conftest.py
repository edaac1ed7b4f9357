"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- In-memory stand-ins for the MongoDB collections
- FastAPI test client with the Mongo dependency overridden
- A client whose storage always fails
"""

import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError
from pymongo.results import InsertOneResult, UpdateResult

from app.database import get_mongo
from app.main import app


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        documents = [copy.deepcopy(doc) for doc in self._documents]
        return documents if length is None else documents[:length]


class FakeCollection:
    """Supports the subset of the motor collection API the services use"""

    def __init__(self):
        self.documents = []

    @staticmethod
    def _matches(document, query):
        return all(document.get(key) == value for key, value in (query or {}).items())

    def find(self, query=None):
        return FakeCursor([doc for doc in self.documents if self._matches(doc, query)])

    async def find_one(self, query):
        for doc in self.documents:
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document):
        # motor adds _id to the caller's dict as well
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def update_one(self, query, update):
        for doc in self.documents:
            if self._matches(doc, query):
                before = copy.deepcopy(doc)
                for key, value in update.get("$set", {}).items():
                    doc[key] = value
                for key, amount in update.get("$inc", {}).items():
                    doc[key] = doc.get(key, 0) + amount
                modified = 1 if doc != before else 0
                return UpdateResult({"n": 1, "nModified": modified, "ok": 1.0}, True)
        return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)


class BrokenCursor:
    async def to_list(self, length=None):
        raise ServerSelectionTimeoutError("cluster unreachable")


class BrokenCollection:
    def find(self, query=None):
        return BrokenCursor()

    async def find_one(self, query):
        raise ServerSelectionTimeoutError("cluster unreachable")

    async def insert_one(self, document):
        raise ServerSelectionTimeoutError("cluster unreachable")

    async def update_one(self, query, update):
        raise ServerSelectionTimeoutError("cluster unreachable")


class FakeMongoGateway:
    def __init__(self, jobs, job_applications):
        self.jobs = jobs
        self.job_applications = job_applications


@pytest.fixture
def mongo():
    """Fresh in-memory collections for each test"""
    return FakeMongoGateway(FakeCollection(), FakeCollection())


def _client_for(gateway):
    app.dependency_overrides[get_mongo] = lambda: gateway
    # No `with` block: the lifespan (real Atlas connection) is not started
    return TestClient(app)


@pytest.fixture
def client(mongo):
    """FastAPI test client backed by the in-memory collections"""
    yield _client_for(mongo)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """FastAPI test client whose storage raises on every operation"""
    yield _client_for(FakeMongoGateway(BrokenCollection(), BrokenCollection()))
    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_data():
    return {
        "title": "Engineer",
        "hr_email": "a@x.com",
        "company": "Acme",
        "category": "Engineering",
    }
