"""
API schemas for Product endpoints
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class ProductCreate(BaseModel):
    """Product document submitted by an admin; stored as submitted.

    The named fields are the ones the catalog filters read. They are left
    untyped so values are stored exactly as sent; everything else (price,
    images, description, ...) passes through untouched.
    """

    model_config = ConfigDict(extra="allow")

    name: Optional[Any] = None
    category: Optional[Any] = None
    brand: Optional[Any] = None
    discount: Optional[Any] = None
