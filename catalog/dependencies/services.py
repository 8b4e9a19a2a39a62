"""
Dependency injection for repositories and services
"""

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection

from catalog.db.mongodb import get_product_collection, get_user_collection
from catalog.repositories.product import ProductRepository
from catalog.repositories.user import UserRepository
from catalog.services.product import ProductService
from catalog.services.user import UserService


def get_user_repository(
    collection: AsyncIOMotorCollection = Depends(get_user_collection),
) -> UserRepository:
    """Get user repository instance"""
    return UserRepository(collection)


def get_product_repository(
    collection: AsyncIOMotorCollection = Depends(get_product_collection),
) -> ProductRepository:
    """Get product repository instance"""
    return ProductRepository(collection)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Get user service instance"""
    return UserService(repository)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository)
