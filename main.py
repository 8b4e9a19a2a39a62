"""
Catalog Service entrypoint
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from catalog.core.config import config
from catalog.core.logger import logger
from catalog.main import app  # noqa: F401


if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting {config.service_name} on port {config.port}",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port
        }
    )

    uvicorn.run(
        "catalog.main:app",
        host=config.host,
        port=config.port,
        reload=config.environment == "development"
    )
