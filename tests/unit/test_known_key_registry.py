"""Tests for KnownKeyRegistry: lazy load, fail-open, single fetch under concurrency."""

import logging
import threading
import time
from unittest.mock import MagicMock

import pytest

from msgcache.application.services.known_key_registry import (
    KnownKeyRegistry,
    KnownKeyRegistryPool,
)
from msgcache.domain.exceptions import CatalogUnavailableException


@pytest.fixture
def provider() -> MagicMock:
    """Mock catalog provider returning two keys."""
    mock = MagicMock()
    mock.list_message_keys.return_value = ["known_key", "mainpage"]
    return mock


def test_does_not_fetch_until_first_use(provider: MagicMock) -> None:
    registry = KnownKeyRegistry(provider, "en")
    assert registry.is_loaded is False
    provider.list_message_keys.assert_not_called()


def test_is_known_loads_once_and_reuses_set(provider: MagicMock) -> None:
    registry = KnownKeyRegistry(provider, "en")
    assert registry.is_known("known_key") is True
    assert registry.is_known("mainpage") is True
    assert registry.is_known("unknown_key") is False
    assert registry.is_loaded is True
    provider.list_message_keys.assert_called_once_with("en")


def test_membership_is_case_sensitive(provider: MagicMock) -> None:
    registry = KnownKeyRegistry(provider, "en")
    assert registry.is_known("Known_key") is False


def test_empty_string_is_ordinary_key() -> None:
    provider = MagicMock()
    provider.list_message_keys.return_value = [""]
    registry = KnownKeyRegistry(provider, "en")
    assert registry.is_known("") is True


def test_size_and_locale(provider: MagicMock) -> None:
    registry = KnownKeyRegistry(provider, "de")
    assert registry.locale == "de"
    assert registry.size == 2
    provider.list_message_keys.assert_called_once_with("de")


def test_provider_error_fails_open(caplog: pytest.LogCaptureFixture) -> None:
    """Catalog failure yields an empty set; the caller never sees the error."""
    provider = MagicMock()
    provider.list_message_keys.side_effect = CatalogUnavailableException("en", "boom")
    registry = KnownKeyRegistry(provider, "en")
    with caplog.at_level(logging.WARNING):
        assert registry.is_known("known_key") is False
    assert registry.size == 0
    assert "Failed to load message keys" in caplog.text


def test_failure_is_not_retried() -> None:
    """Empty result is cached for the process lifetime (no invalidation)."""
    provider = MagicMock()
    provider.list_message_keys.side_effect = RuntimeError("down")
    registry = KnownKeyRegistry(provider, "en")
    registry.is_known("a")
    registry.is_known("b")
    assert provider.list_message_keys.call_count == 1


def test_none_result_is_empty_set() -> None:
    provider = MagicMock()
    provider.list_message_keys.return_value = None
    registry = KnownKeyRegistry(provider, "en")
    assert registry.is_known("known_key") is False
    assert registry.is_loaded is True


def test_iteration_error_fails_open() -> None:
    """Errors raised while iterating a lazy result are also contained."""

    def broken_keys(locale):
        yield "first"
        raise OSError("read failed")

    provider = MagicMock()
    provider.list_message_keys.side_effect = broken_keys
    registry = KnownKeyRegistry(provider, "en")
    assert registry.is_known("first") is False


def test_concurrent_first_access_fetches_once() -> None:
    """Threads racing on the first lookup share one fetch and one set."""
    calls = []

    class SlowProvider:
        def list_message_keys(self, locale):
            calls.append(locale)
            time.sleep(0.05)
            return ["known_key"]

    registry = KnownKeyRegistry(SlowProvider(), "en")
    barrier = threading.Barrier(8)
    results: list[bool] = []

    def worker() -> None:
        barrier.wait()
        results.append(registry.is_known("known_key"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls == ["en"]
    assert results == [True] * 8


class TestKnownKeyRegistryPool:
    """One registry per locale, created on demand."""

    def test_same_locale_returns_same_registry(self, provider: MagicMock) -> None:
        pool = KnownKeyRegistryPool(provider)
        assert pool.for_locale("en") is pool.for_locale("en")

    def test_locales_are_independent(self) -> None:
        provider = MagicMock()
        provider.list_message_keys.side_effect = lambda locale: {
            "en": ["known_key"],
            "de": ["nur_deutsch"],
        }[locale]
        pool = KnownKeyRegistryPool(provider)
        assert pool.for_locale("en").is_known("known_key") is True
        assert pool.for_locale("de").is_known("known_key") is False
        assert pool.for_locale("de").is_known("nur_deutsch") is True
        assert pool.locales() == ["en", "de"]
