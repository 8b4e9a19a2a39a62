"""
Error handling utilities following FastAPI best practices

Every failure is rendered as ``{"error": <safe message>}``; internal
exception text is logged, never returned to the client.
"""

import traceback
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from catalog.core.config import config
from catalog.core.logger import logger

UNAUTHORIZED_MESSAGE = "unauthorized access"
SERVER_ERROR_MESSAGE = "Server error"


class ErrorResponse(Exception):
    """Custom exception for application errors"""

    def __init__(self, message: str, status_code: int = 400, details: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    error: str
    details: dict = None


def unauthorized() -> HTTPException:
    """The single 401 raised by both credential gates"""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_MESSAGE,
    )


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for custom ErrorResponse exceptions"""
    metadata = {
        "event": "error_response",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
        **exc.details,
    }

    if config.environment == "development":
        metadata["traceback"] = traceback.format_exc()

    logger.error(f"Error: {exc.message}", metadata=metadata)

    content = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details

    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handler for FastAPI HTTPException"""
    metadata = {
        "event": "http_exception",
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
    }

    if exc.status_code >= 500:
        logger.error(f"HTTPException: {exc.detail}", metadata=metadata)
    else:
        logger.warning(f"HTTPException: {exc.detail}", metadata=metadata)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request validation failures"""
    logger.warning(
        "Validation error",
        metadata={"event": "validation_error", "url": str(request.url), "errors": str(exc.errors())},
    )
    return JSONResponse(
        status_code=422,
        content={"error": "Validation error", "details": jsonable_errors(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler: log the failure, answer with a generic 500"""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}",
        error=exc,
        metadata={
            "event": "unhandled_exception",
            "url": str(request.url),
            "method": request.method,
            "traceback": traceback.format_exc(),
        },
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR_MESSAGE},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Strip non-serializable context (exception objects) from validation errors"""
    return [
        {key: value for key, value in err.items() if key in ("loc", "msg", "type")}
        for err in exc.errors()
    ]
