"""
Home/Root API endpoints
"""

from fastapi import APIRouter

from catalog.core.config import config

router = APIRouter()


@router.get("/")
async def root():
    """
    Root endpoint - Service information.
    """
    return {
        "service": config.service_name,
        "version": config.service_version,
        "environment": config.environment,
        "message": "Catalog Service is running",
    }
