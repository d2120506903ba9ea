"""Presentation-layer dependency injection.

Components are built once in msgcache.main.create_app() and stored on
app.state; routes depend only on these accessors, never on infrastructure
directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from msgcache.application.services.message_cache_guard import MessageCacheGuard
from msgcache.application.services.skipped_message_log import SkippedMessageLog
from msgcache.application.use_cases.message_lookup import MessageLookupService
from msgcache.core.tenant_context import get_tenant_id


def get_guard(request: Request) -> MessageCacheGuard:
    """Return the process-wide message cache guard."""
    return request.app.state.guard


def get_lookup_service(request: Request) -> MessageLookupService:
    """Return the guarded message lookup service."""
    return request.app.state.lookup_service


def get_process_skipped_log(request: Request) -> SkippedMessageLog | None:
    """Return the process-wide skipped-message log, or None when debug output is off."""
    return getattr(request.app.state, "skipped_messages", None)


def get_current_locale(request: Request) -> str:
    """Return the locale named by the locale header if it is served, else the default."""
    header_name = getattr(request.app.state, "locale_header_name", "X-Locale")
    requested = request.headers.get(header_name)
    return request.app.state.lookup_service.resolve_locale(
        requested.strip() if requested else None
    )


def get_current_tenant() -> str | None:
    """Return the tenant ID set by TenantContextMiddleware (None = default tenant)."""
    return get_tenant_id()


GuardDep = Annotated[MessageCacheGuard, Depends(get_guard)]
LookupServiceDep = Annotated[MessageLookupService, Depends(get_lookup_service)]
SkippedLogDep = Annotated[SkippedMessageLog | None, Depends(get_process_skipped_log)]
TenantDep = Annotated[str | None, Depends(get_current_tenant)]
LocaleDep = Annotated[str, Depends(get_current_locale)]
