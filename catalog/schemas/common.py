"""
Shared API schemas
"""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    success: bool = True


class InsertResult(BaseModel):
    """Outcome of a single-document insert"""
    acknowledged: bool
    insertedId: str = Field(..., description="Identifier of the inserted document")


class InsertResponse(BaseModel):
    message: str
    result: InsertResult
