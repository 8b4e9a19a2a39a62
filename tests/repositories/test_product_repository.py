"""Unit tests for ProductRepository and UserRepository error handling"""
import pytest
from unittest.mock import AsyncMock
from bson import ObjectId
from pymongo.errors import PyMongoError

from catalog.core.errors import ErrorResponse
from catalog.repositories.product import ProductRepository, serialize_document
from catalog.repositories.user import UserRepository


def test_serialize_document_converts_object_id():
    oid = ObjectId("507f1f77bcf86cd799439011")
    doc = {"_id": oid, "name": "Tote"}

    result = serialize_document(doc)

    assert result == {"id": "507f1f77bcf86cd799439011", "name": "Tote"}
    assert "_id" in doc


class TestProductRepository:

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_collection, sample_product_doc, product_id):
        mock_collection.find_one.return_value = sample_product_doc
        repository = ProductRepository(mock_collection)

        result = await repository.get_by_id(product_id)

        assert result["id"] == product_id
        assert result["name"] == "Trail Runner Sneakers"
        mock_collection.find_one.assert_called_once_with({"_id": ObjectId(product_id)})

    @pytest.mark.asyncio
    async def test_get_by_id_malformed_id_skips_query(self, mock_collection):
        repository = ProductRepository(mock_collection)

        assert await repository.get_by_id("not-an-id") is None
        mock_collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_insert_copies_document(self, mock_collection, product_id):
        repository = ProductRepository(mock_collection)
        doc = {"name": "Tote"}

        result = await repository.insert(doc)

        assert result.insertedId == product_id
        assert result.acknowledged is True
        assert mock_collection.insert_one.call_args.args[0] is not doc

    @pytest.mark.asyncio
    async def test_find_passes_query(self, mock_collection, sample_product_doc):
        mock_collection.find.return_value.to_list = AsyncMock(return_value=[sample_product_doc])
        repository = ProductRepository(mock_collection)

        result = await repository.find({"discount": {"$gt": 0}})

        mock_collection.find.assert_called_once_with({"discount": {"$gt": 0}})
        assert result[0]["id"] == "507f1f77bcf86cd799439011"

    @pytest.mark.asyncio
    async def test_database_error_becomes_safe_500(self, mock_collection):
        mock_collection.find.return_value.to_list = AsyncMock(side_effect=PyMongoError("connection refused at 10.0.0.5"))
        repository = ProductRepository(mock_collection)

        with pytest.raises(ErrorResponse) as exc_info:
            await repository.find({})

        assert exc_info.value.status_code == 500
        assert "10.0.0.5" not in exc_info.value.message


class TestUserRepository:

    @pytest.mark.asyncio
    async def test_find_by_email_error(self, mock_collection):
        mock_collection.find_one = AsyncMock(side_effect=PyMongoError("boom"))
        repository = UserRepository(mock_collection)

        with pytest.raises(ErrorResponse) as exc_info:
            await repository.find_by_email("alice@example.com")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Database error during user retrieval"
