"""
Health API endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from catalog.core.config import config
from catalog.core.logger import logger
from catalog.db.mongodb import MongoDatabase, get_database

router = APIRouter()


@router.get("/health")
def health_check():
    """Basic liveness check"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": config.service_version,
    }


@router.get("/health/ready")
async def readiness_check(database: MongoDatabase = Depends(get_database)):
    """Readiness probe - the service is ready once MongoDB answers a ping"""
    try:
        await database.ping()
    except Exception as e:
        logger.warning(
            "Readiness check failed",
            metadata={"event": "readiness_check_failed", "check": "mongodb", "error": str(e)},
        )
        return JSONResponse(
            status_code=503,
            content={
                "status": "not ready",
                "service": config.service_name,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "checks": [{"name": "mongodb", "status": "unhealthy"}],
            },
        )

    return {
        "status": "ready",
        "service": config.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": [{"name": "mongodb", "status": "healthy"}],
    }
