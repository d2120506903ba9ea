"""Cache: Redis-backed store of tenant message customizations and key builders.

This is the expensive downstream lookup the guard protects. CacheService
uses msgcache.core.config; key format is in keys.py.
"""

from msgcache.infrastructure.cache.keys import message_key
from msgcache.infrastructure.cache.redis_cache import CacheService

__all__ = ["CacheService", "message_key"]
