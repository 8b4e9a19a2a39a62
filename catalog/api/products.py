"""
Product API endpoints following FastAPI best practices
Clean API layer with dependency injection
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from catalog.core.errors import ErrorResponseModel
from catalog.dependencies.auth import require_admin
from catalog.dependencies.services import get_product_service
from catalog.models.user import AuthenticatedIdentity
from catalog.schemas.common import InsertResponse
from catalog.schemas.product import ProductCreate
from catalog.services.product import ProductService

router = APIRouter()


@router.post(
    "/products",
    response_model=InsertResponse,
    responses={401: {"model": ErrorResponseModel}, 500: {"model": ErrorResponseModel}},
)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
    identity: AuthenticatedIdentity = Depends(require_admin),
):
    """
    Add a product to the catalog. Requires an admin credential.
    """
    return await service.create_product(product, created_by=identity.email)


@router.get("/products", response_model=List[Dict[str, Any]])
async def list_products(
    discount: Optional[str] = Query(None, description='"true" for discounted products, "false" for the rest'),
    service: ProductService = Depends(get_product_service),
):
    """
    List products, optionally split by discount.
    """
    return await service.list_products(discount)


@router.get("/products/filter", response_model=List[Dict[str, Any]])
async def filter_products(
    categories: Optional[List[str]] = Query(None, description="Categories, repeated or comma-separated"),
    brands: Optional[List[str]] = Query(None, description="Brands, repeated or comma-separated"),
    discount: Optional[str] = Query(None, description='"true" or "false"'),
    name: Optional[str] = Query(None, description="Case-insensitive part of the product name"),
    service: ProductService = Depends(get_product_service),
):
    """
    List products matching every supplied filter.
    """
    return await service.filter_products(categories=categories, brands=brands, discount=discount, name=name)


@router.get(
    "/productDetails/{product_id}",
    response_model=Dict[str, Any],
    responses={404: {"model": ErrorResponseModel}},
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    """
    Get a product by its ID.
    """
    return await service.get_product(product_id)
