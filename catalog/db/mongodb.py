"""
MongoDB connection pool and collection dependencies

One MongoDatabase is built in the application lifespan and stored on
``app.state.mongo``; request handlers reach it only through the FastAPI
dependencies below.
"""

from typing import Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from catalog.core.config import config
from catalog.core.errors import ErrorResponse
from catalog.core.logger import logger

USERS_COLLECTION = "users"
PRODUCTS_COLLECTION = "products"


class MongoDatabase:
    """Owns the motor client (and its connection pool) for the process lifetime"""

    def __init__(self, url: str, database_name: str):
        self.url = url
        self.database_name = database_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    def from_config(cls) -> "MongoDatabase":
        return cls(config.mongodb_url, config.mongodb_database)

    async def connect(self) -> None:
        """Create the client and confirm the deployment answers a ping"""
        logger.info("Connecting to MongoDB...")

        try:
            self.client = AsyncIOMotorClient(self.url)
            self.database = self.client[self.database_name]

            await self.ping()

            logger.info(
                f"Successfully connected to MongoDB database '{self.database_name}'",
                metadata={"event": "mongodb_connected", "database": self.database_name},
            )
        except Exception as e:
            logger.error(
                "Could not connect to MongoDB",
                error=e,
                metadata={"event": "mongodb_connection_error"},
            )
            raise ErrorResponse("Could not connect to MongoDB", status_code=503)

    async def ping(self) -> None:
        await self.client.admin.command("ping")

    def close(self) -> None:
        """Close database connection"""
        logger.info("Closing connection to MongoDB...")
        if self.client is not None:
            self.client.close()
            self.client = None
            self.database = None

    def collection(self, name: str) -> AsyncIOMotorCollection:
        if self.database is None:
            raise ErrorResponse("Database is not connected", status_code=503)
        return self.database[name]


def get_database(request: Request) -> MongoDatabase:
    """Get the process-wide MongoDatabase from application state"""
    return request.app.state.mongo


def get_user_collection(request: Request) -> AsyncIOMotorCollection:
    """Get users collection"""
    return get_database(request).collection(USERS_COLLECTION)


def get_product_collection(request: Request) -> AsyncIOMotorCollection:
    """Get products collection"""
    return get_database(request).collection(PRODUCTS_COLLECTION)
