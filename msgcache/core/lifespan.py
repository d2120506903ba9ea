"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (Redis message store, telemetry,
optional known-key preload).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from msgcache.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: Redis message store (if enabled), telemetry (if enabled).
    Shutdown order: store disconnect, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.redis_enabled:
        from msgcache.infrastructure.cache.redis_cache import CacheService

        cache = CacheService(settings=settings)
        await cache.connect()
        app.state.cache = cache
        app.state.lookup_service.attach_store(cache)
    else:
        app.state.cache = None

    if settings.telemetry_enabled:
        from msgcache.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.start()
        set_telemetry(telemetry)
        telemetry.instrument(app, redis=settings.redis_enabled)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        app.state.lookup_service.attach_store(None)
        await app.state.cache.disconnect()
        app.state.cache = None
        logger.info("Cache disconnected")

    from msgcache.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
