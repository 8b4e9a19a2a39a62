"""
Middleware modules for the Catalog Service
"""

from .correlation_id import (
    CorrelationIdMiddleware,
    get_correlation_id,
    normalize_correlation_id,
)

__all__ = [
    "CorrelationIdMiddleware",
    "get_correlation_id",
    "normalize_correlation_id",
]
