"""Unit tests for UserService"""
import pytest

from catalog.repositories.user import UserRepository
from catalog.schemas.user import UserCreate
from catalog.services.user import UserService


@pytest.fixture
def user_service(users_collection):
    return UserService(UserRepository(users_collection))


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_first_save_inserts(self, user_service, users_collection):
        result = await user_service.create_user(UserCreate(email="alice@example.com", name="Alice"))

        assert result.message == "User saved successfully"
        assert result.result.acknowledged is True
        assert len(users_collection.docs) == 1
        assert users_collection.docs[0]["name"] == "Alice"

    @pytest.mark.asyncio
    async def test_second_save_is_skipped(self, user_service, users_collection):
        await user_service.create_user(UserCreate(email="alice@example.com"))

        result = await user_service.create_user(UserCreate(email="alice@example.com", name="Other"))

        assert result.message == "User already exists"
        assert result.result is None
        assert len(users_collection.docs) == 1
        assert "name" not in users_collection.docs[0]


class TestGetUserRole:

    @pytest.mark.asyncio
    async def test_unknown_user(self, user_service):
        assert await user_service.get_user_role("none@x.com") is None

    @pytest.mark.asyncio
    async def test_user_with_role(self, user_service, users_collection):
        users_collection.docs.append({"email": "admin@example.com", "role": "admin"})

        assert await user_service.get_user_role("admin@example.com") == {"role": "admin"}

    @pytest.mark.asyncio
    async def test_user_without_role(self, user_service, users_collection):
        users_collection.docs.append({"email": "bob@example.com"})

        assert await user_service.get_user_role("bob@example.com") == {}


class TestListUsers:

    @pytest.mark.asyncio
    async def test_list_users_serializes_ids(self, user_service):
        await user_service.create_user(UserCreate(email="alice@example.com"))

        users = await user_service.list_users()

        assert len(users) == 1
        assert users[0]["email"] == "alice@example.com"
        assert isinstance(users[0]["id"], str)
        assert "_id" not in users[0]
