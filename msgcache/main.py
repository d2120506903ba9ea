"""FastAPI application entry point.

Wiring only: components, lifespan, exception handlers, middleware, routers.
No business logic here. See msgcache.core.composition and msgcache.core.lifespan.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before importing or calling create_app().
"""

from typing import Annotated

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse

from msgcache.api.v1 import api_router
from msgcache.api.v1.dependencies import LocaleDep, LookupServiceDep, TenantDep
from msgcache.application.interfaces.services import ICatalogProvider
from msgcache.core.composition import build_components
from msgcache.core.config import get_settings
from msgcache.core.exception_handlers import register_exception_handlers
from msgcache.core.lifespan import create_lifespan
from msgcache.middleware import (
    RequestIDMiddleware,
    SkippedMessagesDebugMiddleware,
    TenantContextMiddleware,
)
from msgcache.pages import render_preview_page, render_root_page
from msgcache.shared.telemetry.logging import setup_logging

MAX_PREVIEW_KEYS = 200


def create_app(catalog: ICatalogProvider | None = None) -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import).

    Args:
        catalog: Optional catalog provider override; else built from settings.
    """
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    components = build_components(settings, catalog=catalog)
    app.state.catalog = components.catalog
    app.state.guard = components.guard
    app.state.lookup_service = components.lookup_service
    app.state.skipped_messages = components.skipped_messages
    app.state.cache = None
    app.state.locale_header_name = settings.locale_header_name

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: request ID -> debug output -> tenant context.
    app.add_middleware(TenantContextMiddleware, header_name=settings.tenant_header_name)
    app.add_middleware(SkippedMessagesDebugMiddleware, enabled=settings.enable_debug)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse)
    def root() -> HTMLResponse:
        """Landing page with links to API documentation."""
        return HTMLResponse(content=render_root_page(settings.app_name))

    @app.get("/preview", response_class=HTMLResponse)
    async def preview(
        lookup_service: LookupServiceDep,
        tenant_id: TenantDep,
        locale: LocaleDep,
        keys: Annotated[list[str] | None, Query()] = None,
    ) -> HTMLResponse:
        """Render the requested messages as a page (debug output is appended here)."""
        results = [
            await lookup_service.get_message(key, tenant_id=tenant_id, locale=locale)
            for key in (keys or [])[:MAX_PREVIEW_KEYS]
        ]
        return HTMLResponse(content=render_preview_page(settings.app_name, results))

    return app


app = create_app()
