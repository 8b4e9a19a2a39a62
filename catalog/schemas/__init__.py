"""
Schemas module initialization
"""

from .common import InsertResponse, InsertResult, SuccessResponse
from .product import ProductCreate
from .user import CredentialClaims, UserCreate, UserRoleResponse, UserSaveResponse

__all__ = [
    "InsertResponse",
    "InsertResult",
    "SuccessResponse",
    "ProductCreate",
    "CredentialClaims",
    "UserCreate",
    "UserRoleResponse",
    "UserSaveResponse",
]
