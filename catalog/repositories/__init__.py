"""
Repositories module initialization
"""

from .product import ProductRepository, serialize_document
from .user import UserRepository

__all__ = [
    "ProductRepository",
    "UserRepository",
    "serialize_document",
]
