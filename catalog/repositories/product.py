"""
Product repository for data access layer following Repository pattern
"""

from typing import Any, Dict, List, Optional
from bson import ObjectId

from pymongo.errors import PyMongoError
from motor.motor_asyncio import AsyncIOMotorCollection

from catalog.core.errors import ErrorResponse
from catalog.core.logger import logger
from catalog.schemas.common import InsertResult


def serialize_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a MongoDB document to a JSON-ready dict with a string ``id``"""
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def insert(self, product_data: Dict[str, Any]) -> InsertResult:
        """Insert a product document as submitted"""
        try:
            result = await self.collection.insert_one(dict(product_data))
            return InsertResult(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))

        except PyMongoError as e:
            logger.error("MongoDB error creating product", error=e, metadata={"event": "create_product_error"})
            raise ErrorResponse("Failed to add product", status_code=500)

    async def find(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Run a structured query and return every matching product"""
        try:
            logger.debug(
                "Querying products",
                metadata={"event": "product_query", "collection": self.collection.name, "query": query},
            )
            docs = await self.collection.find(query).to_list(length=None)
            return [serialize_document(doc) for doc in docs]

        except PyMongoError as e:
            logger.error("MongoDB error listing products", error=e, metadata={"event": "list_products_error"})
            raise ErrorResponse("Database error during product listing", status_code=500)

    async def get_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        """Get product by ID"""
        try:
            # Malformed ids cannot match any document
            if not ObjectId.is_valid(product_id):
                return None

            doc = await self.collection.find_one({"_id": ObjectId(product_id)})
            return serialize_document(doc) if doc else None

        except PyMongoError as e:
            logger.error("MongoDB error getting product", error=e, metadata={"event": "get_product_error"})
            raise ErrorResponse("Database error during product retrieval", status_code=500)
