#!/usr/bin/env python3
"""
Seed the products collection with sample catalog data for local development.
"""

import asyncio

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient

load_dotenv()

from catalog.core.config import config  # noqa: E402
from catalog.db.mongodb import PRODUCTS_COLLECTION  # noqa: E402

SAMPLE_PRODUCTS = [
    {"name": "Trail Runner Sneakers", "category": "shoes", "brand": "Stride", "price": 89.0, "discount": 15},
    {"name": "Leather Ankle Boots", "category": "shoes", "brand": "Northfield", "price": 140.0, "discount": 0},
    {"name": "Canvas Tote Bag", "category": "bags", "brand": "Carryall", "price": 35.0},
    {"name": "Weekender Duffel", "category": "bags", "brand": "Northfield", "price": 120.0, "discount": 20},
    {"name": "Wool Beanie", "category": "hats", "brand": "Stride", "price": 25.0},
    {"name": "Sun Bucket Hat", "category": "hats", "brand": "Carryall", "price": 30.0, "discount": 5},
]


async def seed():
    """Replace the products collection with the sample products"""
    client = AsyncIOMotorClient(config.mongodb_url)
    products_col = client[config.mongodb_database][PRODUCTS_COLLECTION]

    try:
        existing_count = await products_col.count_documents({})
        if existing_count > 0:
            print(f"Found {existing_count} existing products. Clearing collection...")
            await products_col.delete_many({})

        result = await products_col.insert_many([dict(product) for product in SAMPLE_PRODUCTS])
        print(f"Successfully seeded {len(result.inserted_ids)} products.")

        print("\nProducts by category:")
        pipeline = [
            {"$group": {"_id": "$category", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}}
        ]
        async for doc in products_col.aggregate(pipeline):
            print(f"  {doc['_id']}: {doc['count']} products")
    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(seed())
