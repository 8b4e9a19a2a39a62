"""Shared test fixtures"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from catalog.db.mongodb import get_database, get_product_collection, get_user_collection
from catalog.main import create_app
from catalog.services.token import TokenService, get_token_service


class FakeCursor:
    """Minimal async cursor over a list of documents"""

    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length=None):
        return [dict(doc) for doc in self.docs]


class FakeCollection:
    """In-memory stand-in for a motor collection (equality queries only)"""

    def __init__(self, name="users"):
        self.name = name
        self.docs = []

    def _matches(self, doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    async def find_one(self, query):
        for doc in self.docs:
            if self._matches(doc, query):
                return dict(doc)
        return None

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(dict(doc))
        return SimpleNamespace(acknowledged=True, inserted_id=doc["_id"])

    def find(self, query=None):
        query = query or {}
        return FakeCursor([doc for doc in self.docs if self._matches(doc, query)])


@pytest.fixture
def mock_collection():
    """Mock MongoDB collection for testing"""
    collection = MagicMock()
    collection.name = "products"
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(
        return_value=SimpleNamespace(acknowledged=True, inserted_id=ObjectId("507f1f77bcf86cd799439011"))
    )
    collection.find.return_value.to_list = AsyncMock(return_value=[])
    return collection


@pytest.fixture
def users_collection():
    """Stateful users collection"""
    return FakeCollection("users")


@pytest.fixture
def token_service():
    """Token service with a fixed test secret"""
    return TokenService(secret="test-secret", environment="test")


@pytest.fixture
def mock_database():
    database = MagicMock()
    database.ping = AsyncMock(return_value=None)
    return database


@pytest.fixture
def app(users_collection, mock_collection, token_service, mock_database):
    """Application with the database and token service overridden"""
    application = create_app()
    application.dependency_overrides[get_user_collection] = lambda: users_collection
    application.dependency_overrides[get_product_collection] = lambda: mock_collection
    application.dependency_overrides[get_token_service] = lambda: token_service
    application.dependency_overrides[get_database] = lambda: mock_database
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_email():
    return "admin@example.com"


@pytest.fixture
def admin_cookie(users_collection, token_service, admin_email):
    """Credential for a stored user whose role is admin"""
    users_collection.docs.append({"_id": ObjectId(), "email": admin_email, "role": "admin"})
    return token_service.issue({"email": admin_email})


@pytest.fixture
def sample_product_doc():
    """Sample product document from MongoDB"""
    return {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "name": "Trail Runner Sneakers",
        "category": "shoes",
        "brand": "Stride",
        "price": 89.0,
        "discount": 15,
    }


@pytest.fixture
def product_id():
    """Sample product ID for testing"""
    return "507f1f77bcf86cd799439011"
