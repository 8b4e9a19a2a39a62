"""
User models for authentication and authorization
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

ADMIN_ROLE = "admin"


class AuthenticatedIdentity(BaseModel):
    """Identity decoded from a verified session credential.

    Only the authentication guard builds these; the admin guard requires one
    as input.
    """

    model_config = ConfigDict(frozen=True)

    email: str
    claims: Dict[str, Any] = Field(default_factory=dict)


class UserRecord(BaseModel):
    """Stored user document, keyed by email"""

    model_config = ConfigDict(extra="allow")

    email: str
    role: Optional[Any] = None

    def is_admin(self) -> bool:
        """Only the exact string "admin" grants admin capability"""
        return self.role == ADMIN_ROLE
