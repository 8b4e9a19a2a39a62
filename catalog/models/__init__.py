"""
Models module initialization
"""

from .user import ADMIN_ROLE, AuthenticatedIdentity, UserRecord

__all__ = [
    "ADMIN_ROLE",
    "AuthenticatedIdentity",
    "UserRecord",
]
