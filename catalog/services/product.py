"""
Product service containing business logic layer
"""

from typing import Any, Dict, List, Optional

from catalog.core.errors import ErrorResponse
from catalog.core.logger import logger
from catalog.repositories.product import ProductRepository
from catalog.schemas.common import InsertResponse
from catalog.schemas.product import ProductCreate
from catalog.services.query_builder import MultiValue, build_discount_query, build_product_query

PRODUCT_ADDED_MESSAGE = "Product added successfully"


class ProductService:
    """Service layer for product business logic"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def create_product(self, product_data: ProductCreate, created_by: str) -> InsertResponse:
        """Insert a product exactly as submitted"""
        doc = product_data.model_dump(exclude_unset=True)
        result = await self.repository.insert(doc)

        logger.info(
            f"Created product {result.insertedId}",
            user_id=created_by,
            metadata={"event": "create_product", "product_id": result.insertedId},
        )

        return InsertResponse(message=PRODUCT_ADDED_MESSAGE, result=result)

    async def list_products(self, discount: Optional[str] = None) -> List[Dict[str, Any]]:
        """List products, optionally split by discount"""
        products = await self.repository.find(build_discount_query(discount))

        logger.info(
            f"Fetched {len(products)} products",
            metadata={"event": "list_products", "count": len(products), "discount": discount},
        )
        return products

    async def filter_products(
        self,
        categories: MultiValue = None,
        brands: MultiValue = None,
        discount: Optional[str] = None,
        name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """List products matching every supplied filter criterion"""
        query = build_product_query(categories=categories, brands=brands, discount=discount, name=name)
        products = await self.repository.find(query)

        logger.info(
            f"Fetched {len(products)} filtered products",
            metadata={
                "event": "filter_products",
                "count": len(products),
                "filters": {
                    "categories": categories,
                    "brands": brands,
                    "discount": discount,
                    "name": name,
                },
            },
        )
        return products

    async def get_product(self, product_id: str) -> Dict[str, Any]:
        """Get product by ID"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise ErrorResponse("Product not found", status_code=404)

        logger.info(
            f"Fetched product {product_id}",
            metadata={"event": "get_product", "product_id": product_id},
        )

        return product
