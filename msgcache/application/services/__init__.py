"""Application services: prefix matcher, known-key registry, decision engine, skipped-key log."""

from msgcache.application.services.known_key_registry import (
    KnownKeyRegistry,
    KnownKeyRegistryPool,
)
from msgcache.application.services.message_cache_guard import MessageCacheGuard
from msgcache.application.services.prefix_matcher import PrefixMatcher
from msgcache.application.services.skipped_message_log import (
    ProcessSkippedMessageRecorder,
    RequestSkippedMessageRecorder,
    SkippedMessageLog,
    begin_request_log,
    end_request_log,
    get_request_log,
)

__all__ = [
    "KnownKeyRegistry",
    "KnownKeyRegistryPool",
    "MessageCacheGuard",
    "PrefixMatcher",
    "ProcessSkippedMessageRecorder",
    "RequestSkippedMessageRecorder",
    "SkippedMessageLog",
    "begin_request_log",
    "end_request_log",
    "get_request_log",
]
