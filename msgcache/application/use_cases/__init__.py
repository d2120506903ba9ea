"""Use cases: guarded message resolution in front of the downstream store."""

from msgcache.application.use_cases.message_lookup import (
    MessageLookupService,
    MessageLookupStats,
    normalize_message_key,
)

__all__ = ["MessageLookupService", "MessageLookupStats", "normalize_message_key"]
