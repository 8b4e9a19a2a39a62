"""
User repository for data access layer following Repository pattern
"""

from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError
from motor.motor_asyncio import AsyncIOMotorCollection

from catalog.core.errors import ErrorResponse
from catalog.core.logger import logger
from catalog.repositories.product import serialize_document
from catalog.schemas.common import InsertResult


class UserRepository:
    """Repository for the ``users`` collection, keyed by email"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a user document by email"""
        try:
            doc = await self.collection.find_one({"email": email})
            return serialize_document(doc) if doc else None

        except PyMongoError as e:
            logger.error("MongoDB error getting user", error=e, metadata={"event": "find_user_error"})
            raise ErrorResponse("Database error during user retrieval", status_code=500)

    async def insert(self, user_data: Dict[str, Any]) -> InsertResult:
        """Insert a user document as submitted"""
        try:
            # insert_one adds _id to the dict it receives
            result = await self.collection.insert_one(dict(user_data))
            return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))

        except PyMongoError as e:
            logger.error("MongoDB error creating user", error=e, metadata={"event": "create_user_error"})
            raise ErrorResponse("Database error during user creation", status_code=500)

    async def list_all(self) -> List[Dict[str, Any]]:
        """Get every user document"""
        try:
            docs = await self.collection.find({}).to_list(length=None)
            return [serialize_document(doc) for doc in docs]

        except PyMongoError as e:
            logger.error("MongoDB error listing users", error=e, metadata={"event": "list_users_error"})
            raise ErrorResponse("Database error during user listing", status_code=500)
