"""
Core module: configuration, logging, error handling and telemetry.

Import from the submodules directly (``catalog.core.config``,
``catalog.core.logger``, ``catalog.core.errors``); the logger depends on the
correlation-id middleware, which itself reads ``catalog.core.config``.
"""
