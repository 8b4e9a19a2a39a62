"""
API schemas for user and credential endpoints
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from catalog.schemas.common import InsertResult


class CredentialClaims(BaseModel):
    """Identity claims submitted to obtain a session credential.

    Any extra fields are carried into the token unchanged.
    """

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)


class UserCreate(BaseModel):
    """User profile; stored as submitted"""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1)


class UserRoleResponse(BaseModel):
    role: Optional[Any] = None


class UserSaveResponse(BaseModel):
    message: str
    result: Optional[InsertResult] = None
