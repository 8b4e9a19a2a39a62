"""
OpenTelemetry Instrumentation for FastAPI

Creates spans for inbound requests and MongoDB operations. Export is left to
the deployment (OTEL_* environment variables / collector sidecar).
"""

from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.pymongo import PymongoInstrumentor

from catalog.core.config import config
from catalog.core.logger import logger


def instrument_app(app):
    """
    Instrument FastAPI application with OpenTelemetry for automatic span creation.

    Args:
        app: FastAPI application instance
    """
    if not config.telemetry_enabled:
        logger.info("OpenTelemetry instrumentation disabled", metadata={"event": "telemetry_disabled"})
        return

    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumented with OpenTelemetry")

        # Motor drives pymongo underneath
        instrumentor = PymongoInstrumentor()
        if not instrumentor.is_instrumented_by_opentelemetry:
            instrumentor.instrument()
            logger.info("PyMongo instrumented with OpenTelemetry")

    except Exception as e:
        logger.error("Failed to instrument application", error=e, metadata={"event": "telemetry_error"})
