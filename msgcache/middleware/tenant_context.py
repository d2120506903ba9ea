"""Tenant context middleware.

Sets the current tenant ID in context from the tenant header so that
lookups read that tenant's message customizations. Values that cannot be
used as a cache key component are ignored (default tenant applies).
"""

from __future__ import annotations

import re
from typing import Callable

from msgcache.core.tenant_context import current_tenant_id
from msgcache.middleware._headers import get_header

TENANT_ID_ALLOWED_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]{1,64}$")


def _sanitize_tenant_id(raw: str | None) -> str | None:
    if not raw:
        return None
    value = raw.strip()
    if not TENANT_ID_ALLOWED_PATTERN.match(value):
        return None
    return value


def TenantContextMiddleware(app: Callable, header_name: str = "X-Tenant-ID") -> Callable:
    """Set tenant context from header before the route runs. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        token = current_tenant_id.set(_sanitize_tenant_id(get_header(scope, header_name)))
        try:
            await app(scope, receive, send)
        finally:
            current_tenant_id.reset(token)

    return asgi_app
