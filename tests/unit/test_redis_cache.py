"""Tests for CacheService message store and cache key builders (mock Redis client)."""

from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from msgcache.core.config import Settings
from msgcache.infrastructure.cache import CacheService, message_key


@pytest.fixture
def settings(catalog_dir) -> Settings:
    return Settings(catalog_path=str(catalog_dir), cache_ttl_messages=120)


@pytest.fixture
def redis_client() -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    return client


def test_message_key_format() -> None:
    assert message_key("t1", "en", "mainpage") == "message:t1:en:mainpage"


def test_message_key_allows_separator_in_message_key() -> None:
    assert message_key("t1", "en", "a:b") == "message:t1:en:a:b"


@pytest.mark.parametrize(("tenant_id", "locale"), [("t:1", "en"), ("t1", "e:n"), ("", "en")])
def test_message_key_rejects_bad_components(tenant_id: str, locale: str) -> None:
    with pytest.raises(ValueError):
        message_key(tenant_id, locale, "k")


async def test_get_message_hit(redis_client: AsyncMock, settings: Settings) -> None:
    redis_client.get.return_value = '"Welcome"'
    cache = CacheService(redis_client=redis_client, settings=settings)
    assert cache.is_available() is True
    assert await cache.get_message("t1", "en", "mainpage") == "Welcome"
    redis_client.get.assert_awaited_once_with("message:t1:en:mainpage")


async def test_get_message_miss(redis_client: AsyncMock, settings: Settings) -> None:
    cache = CacheService(redis_client=redis_client, settings=settings)
    assert await cache.get_message("t1", "en", "mainpage") is None


async def test_set_message_uses_default_ttl(redis_client: AsyncMock, settings: Settings) -> None:
    cache = CacheService(redis_client=redis_client, settings=settings)
    assert await cache.set_message("t1", "en", "mainpage", "Home") is True
    redis_client.setex.assert_awaited_once_with("message:t1:en:mainpage", 120, '"Home"')


async def test_redis_error_is_a_miss(redis_client: AsyncMock, settings: Settings) -> None:
    redis_client.get.side_effect = redis.ResponseError("WRONGTYPE")
    cache = CacheService(redis_client=redis_client, settings=settings)
    assert await cache.get_message("t1", "en", "mainpage") is None


async def test_unavailable_without_client(settings: Settings) -> None:
    cache = CacheService(settings=settings)
    assert cache.is_available() is False
    assert await cache.get_message("t1", "en", "mainpage") is None
    assert await cache.set_message("t1", "en", "mainpage", "x") is False


async def test_undecodable_value_is_a_miss(redis_client: AsyncMock, settings: Settings) -> None:
    redis_client.get.return_value = "not-json"
    cache = CacheService(redis_client=redis_client, settings=settings)
    assert await cache.get_message("t1", "en", "mainpage") is None


async def test_non_string_value_is_a_miss(redis_client: AsyncMock, settings: Settings) -> None:
    redis_client.get.return_value = '{"text": "Welcome"}'
    cache = CacheService(redis_client=redis_client, settings=settings)
    assert await cache.get_message("t1", "en", "mainpage") is None


async def test_disconnect_closes_client(redis_client: AsyncMock, settings: Settings) -> None:
    cache = CacheService(redis_client=redis_client, settings=settings)
    await cache.disconnect()
    redis_client.aclose.assert_awaited_once()
    assert cache.is_available() is False
