"""
Dependencies module initialization
"""

from .auth import AdminGuard, AuthenticationGuard, authenticate, require_admin
from .services import (
    get_product_repository,
    get_product_service,
    get_user_repository,
    get_user_service,
)

__all__ = [
    "AdminGuard",
    "AuthenticationGuard",
    "authenticate",
    "require_admin",
    "get_product_repository",
    "get_product_service",
    "get_user_repository",
    "get_user_service",
]
