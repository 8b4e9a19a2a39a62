"""
Services module initialization
"""

from .product import ProductService
from .query_builder import build_discount_query, build_product_query, split_multi_value
from .token import TokenService, get_token_service
from .user import UserService

__all__ = [
    "ProductService",
    "UserService",
    "TokenService",
    "get_token_service",
    "build_discount_query",
    "build_product_query",
    "split_multi_value",
]
