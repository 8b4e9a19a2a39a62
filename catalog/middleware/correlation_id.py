"""
Request correlation for the Catalog Service.

Every request is tagged with an id taken from the inbound correlation header
when it looks like an id, or a freshly generated one otherwise. The id lives
in a context variable for the duration of the request so log entries can
carry it, and it is echoed on every response the app produces, including
401/404 error bodies rendered by the exception handlers.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from catalog.core.config import config

MAX_CORRELATION_ID_LENGTH = 128

# Printable id characters only
_CORRELATION_ID_PATTERN = re.compile(r"[A-Za-z0-9._:\-]+")

correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the request being handled, if any"""
    return correlation_id_ctx.get()


def new_correlation_id() -> str:
    return str(uuid.uuid4())


def normalize_correlation_id(value: Optional[str]) -> str:
    """
    Accept a client supplied id or replace it.

    Blank, oversized or non-id values (spaces, control characters, quotes)
    are replaced by a generated id rather than trimmed.
    """
    if value:
        value = value.strip()
    if (
        not value
        or len(value) > MAX_CORRELATION_ID_LENGTH
        or not _CORRELATION_ID_PATTERN.fullmatch(value)
    ):
        return new_correlation_id()
    return value


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id to each request and echoes it on the response"""

    def __init__(self, app: ASGIApp, header_name: Optional[str] = None):
        super().__init__(app)
        self.header_name = header_name or config.correlation_id_header

    async def dispatch(self, request: Request, call_next):
        correlation_id = normalize_correlation_id(request.headers.get(self.header_name))

        token = correlation_id_ctx.set(correlation_id)
        request.state.correlation_id = correlation_id
        try:
            response = await call_next(request)
        finally:
            correlation_id_ctx.reset(token)

        response.headers[self.header_name] = correlation_id
        return response
