"""
Database module initialization
"""

from .mongodb import (
    MongoDatabase,
    get_database,
    get_product_collection,
    get_user_collection,
)

__all__ = [
    "MongoDatabase",
    "get_database",
    "get_product_collection",
    "get_user_collection",
]
