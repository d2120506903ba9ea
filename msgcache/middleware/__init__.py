"""HTTP middleware: request ID, tenant context, skipped-message debug output.

Applied in main app; order matters (first added = outermost).
Import and use from msgcache.main.
"""

from msgcache.middleware.request_id import RequestIDMiddleware
from msgcache.middleware.skipped_messages import SkippedMessagesDebugMiddleware
from msgcache.middleware.tenant_context import TenantContextMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SkippedMessagesDebugMiddleware",
    "TenantContextMiddleware",
]
