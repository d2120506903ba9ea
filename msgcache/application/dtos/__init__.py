"""Application DTOs (read models returned by use cases)."""

from msgcache.application.dtos.message import (
    MessageLookupResult,
    MessageLookupStatsSnapshot,
)

__all__ = ["MessageLookupResult", "MessageLookupStatsSnapshot"]
