"""Redis-based store of tenant message customizations.

Every read here is the round trip the message cache guard exists to avoid
for nonexistent keys. Values are JSON-encoded strings stored under
message:<tenant>:<locale>:<key> (see msgcache.infrastructure.cache.keys).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

import redis.asyncio as redis

from msgcache.infrastructure.cache.keys import message_key

if TYPE_CHECKING:
    from msgcache.core.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CONNECTION_ERRORS = (redis.ConnectionError, redis.TimeoutError)


class CacheService:
    """Async Redis message store with TTL support (implements IMessageStore).

    Call connect() at startup and disconnect() at shutdown. When Redis is
    unreachable the store reports itself unavailable, reads are misses and
    writes return False; lookups then fall back to catalog defaults.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: "Settings | None" = None,
    ) -> None:
        """Initialize the store.

        Args:
            redis_client: Optional pre-built client (tests, DI); treated as connected.
            settings: Application settings; if None, uses get_settings().
        """
        if settings is None:
            from msgcache.core.config import get_settings

            settings = get_settings()
        self.redis = redis_client
        self.settings = settings
        self._connected = redis_client is not None

    def _new_client(self) -> redis.Redis:
        password = self.settings.redis_password
        return redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=password.get_secret_value() if password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )

    async def connect(self) -> None:
        """Open the connection and ping. Failure leaves the store unavailable."""
        if self.redis is not None:
            return
        client = self._new_client()
        try:
            await client.ping()
        except _CONNECTION_ERRORS as e:
            logger.warning("Redis connection failed: %s. Message store disabled.", e)
            self._connected = False
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis message store connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close the connection. Call on app shutdown."""
        if self.redis is None:
            return
        await self.redis.aclose()
        self.redis = None
        self._connected = False
        logger.info("Redis message store disconnected")

    async def _reconnect(self) -> bool:
        """Drop the current client and connect again. Returns True on success."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing stale Redis connection")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _call(
        self,
        op: str,
        key: str,
        command: Callable[[redis.Redis], Awaitable[T]],
        default: T,
    ) -> T:
        """Run command against the client, retrying once after a reconnect.

        Any Redis error yields default; the store never raises into a lookup.
        """
        if not self.is_available() or self.redis is None:
            return default
        try:
            return await command(self.redis)
        except _CONNECTION_ERRORS:
            if not await self._reconnect() or self.redis is None:
                logger.warning("Redis %s unavailable for key %s (disconnected)", op, key)
                return default
        except redis.RedisError:
            logger.exception("Redis %s error for key %s", op, key)
            return default
        try:
            return await command(self.redis)
        except redis.RedisError:
            logger.exception("Redis %s error for key %s after reconnect", op, key)
            return default

    async def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value at key, or None if missing or unavailable."""
        raw = await self._call("get", key, lambda client: client.get(key), None)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable cache value for key %s", key)
            return None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store value (JSON-encoded) with TTL; default TTL is cache_ttl_messages."""
        ttl = ttl or self.settings.cache_ttl_messages
        serialized = json.dumps(value)

        async def setex(client: redis.Redis) -> bool:
            await client.setex(key, ttl, serialized)
            return True

        stored = await self._call("set", key, setex, False)
        if stored:
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return stored

    async def get_message(self, tenant_id: str, locale: str, key: str) -> str | None:
        """Return the tenant's customized text for key, or None."""
        value = await self.get(message_key(tenant_id, locale, key))
        return value if isinstance(value, str) else None

    async def set_message(
        self, tenant_id: str, locale: str, key: str, text: str, ttl: int | None = None
    ) -> bool:
        """Store the tenant's customized text for key."""
        return await self.set(message_key(tenant_id, locale, key), text, ttl=ttl)
