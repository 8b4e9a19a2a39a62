"""
FastAPI Application - Catalog Service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.core.config import config
from catalog.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from catalog.core.logger import logger
from catalog.core.telemetry import instrument_app
from catalog.db.mongodb import MongoDatabase
from catalog.api import auth, health, home, products, users
from catalog.middleware import CorrelationIdMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Catalog Service...")

    # The one connection pool for this process; handlers reach it via app.state
    database = MongoDatabase.from_config()
    await database.connect()
    app.state.mongo = database

    logger.info(
        "Catalog Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.port,
        },
    )

    yield

    logger.info("Shutting down Catalog Service...")
    database.close()


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, handlers and routers"""
    app = FastAPI(
        title="Catalog Service",
        description="E-commerce catalog API with cookie-based session credentials",
        version=config.service_version,
        lifespan=lifespan,
    )

    instrument_app(app)

    app.add_exception_handler(ErrorResponse, error_response_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(home.router, tags=["home"])
    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, tags=["auth"])
    app.include_router(users.router, tags=["users"])
    app.include_router(products.router, tags=["products"])

    return app


app = create_app()
