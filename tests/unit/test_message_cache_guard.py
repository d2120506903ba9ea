"""Tests for MessageCacheGuard: decision order, lookup hook, observers, fail-open."""

from unittest.mock import MagicMock

import pytest

from msgcache.application.services.known_key_registry import (
    KnownKeyRegistry,
    KnownKeyRegistryPool,
)
from msgcache.application.services.message_cache_guard import MessageCacheGuard
from msgcache.application.services.prefix_matcher import PrefixMatcher
from msgcache.domain.enums import Decision
from msgcache.infrastructure.catalog.memory_catalog import InMemoryCatalogProvider


def _guard(known: list[str], prefixes: list[str], observers=()) -> MessageCacheGuard:
    catalog = InMemoryCatalogProvider({"en": {k: k for k in known}})
    return MessageCacheGuard(
        KnownKeyRegistry(catalog, "en"), PrefixMatcher(prefixes), observers=observers
    )


def test_known_key_exists_without_consulting_matcher() -> None:
    """Known keys return EXISTS; the prefix matcher is never asked."""
    catalog = MagicMock()
    catalog.list_message_keys.return_value = ["known_key"]
    matcher = MagicMock()
    guard = MessageCacheGuard(KnownKeyRegistry(catalog, "en"), matcher)

    assert guard.decide("known_key") is Decision.EXISTS
    assert guard.on_message_cache_get("known_key") is True
    matcher.matches.assert_not_called()
    catalog.list_message_keys.assert_called_once()


def test_unknown_unmatched_key_is_unknown() -> None:
    catalog = MagicMock()
    catalog.list_message_keys.return_value = ["known_key"]
    matcher = MagicMock()
    matcher.matches.return_value = False
    guard = MessageCacheGuard(KnownKeyRegistry(catalog, "en"), matcher)

    assert guard.decide("unknown_key") is Decision.UNKNOWN
    matcher.matches.assert_called_once_with("unknown_key")


def test_unknown_but_matched_key_does_not_exist() -> None:
    guard = _guard(["known_key"], ["matched_key"])
    assert guard.decide("matched_key") is Decision.DOES_NOT_EXIST
    assert guard.on_message_cache_get("matched_key") is False


def test_known_key_wins_over_prefix_match() -> None:
    """A key that is both known and prefix-matched proceeds normally."""
    guard = _guard(["tooltip-search"], ["tooltip-"])
    assert guard.decide("tooltip-search") is Decision.EXISTS
    assert guard.decide("tooltip-other") is Decision.DOES_NOT_EXIST


def test_no_prefixes_never_short_circuits() -> None:
    guard = _guard(["known_key"], [])
    assert guard.decide("known_key") is Decision.EXISTS
    assert guard.decide("unknown_key") is Decision.UNKNOWN
    assert guard.decide("") is Decision.UNKNOWN


def test_empty_key_is_looked_up_like_any_other() -> None:
    assert _guard([""], ["x"]).decide("") is Decision.EXISTS
    assert _guard([], ["x"]).decide("") is Decision.UNKNOWN


@pytest.mark.parametrize(
    ("prefixes", "expected"),
    [
        (["matched_key"], {"matched_key": False}),
        (
            ["matched_key", "another_matched_key"],
            {"matched_key": False, "non_matched_key": True, "another_matched_key": False},
        ),
        (["prefix_"], {"prefix_matched_key": False}),
        (
            ["prefix_"],
            {"prefix_matched_key": False, "not_prefix_matched_key": True, "prefix_another_one": False},
        ),
        (
            ["prefix_", "another_prefix"],
            {"prefix_matched_key": False, "not_prefix_matched_key": True, "another_one": True},
        ),
        (
            ["prefix_", "another_prefix"],
            {
                "prefix_matched_key": False,
                "not_prefix_matched_key": True,
                "prefix_another_key": False,
                "another_prefix_key": False,
            },
        ),
        (
            ["prefix_", "another_prefix"],
            {
                "not_prefix_matched_key": True,
                "not_another_prefix_key": True,
                "random_prefix_abc": True,
                "another_prefix_key": False,
            },
        ),
        (
            ["prefix.", ".*prefix", "|prefix..."],
            {
                "|prefix..._matched_key": False,
                ".*prefix_matched_key": False,
                "prefix._matched_key": False,
                "not_prefix_matched_key": True,
            },
        ),
    ],
    ids=[
        "single key",
        "multiple keys",
        "single prefix key",
        "multiple prefix keys",
        "multiple prefixes with single match",
        "multiple prefixes with matches",
        "multiple prefixes with center matches",
        "multiple prefixes with special characters",
    ],
)
def test_lookup_hook_with_prefixes(prefixes: list[str], expected: dict[str, bool]) -> None:
    guard = _guard(["some_key"], prefixes)
    for key, continue_lookup in expected.items():
        assert guard.on_message_cache_get(key) is continue_lookup, key


def test_empty_catalog_lets_matcher_decide() -> None:
    catalog = MagicMock()
    catalog.list_message_keys.side_effect = RuntimeError("catalog down")
    guard = MessageCacheGuard(KnownKeyRegistry(catalog, "en"), PrefixMatcher(["tooltip-"]))
    assert guard.decide("tooltip-search") is Decision.DOES_NOT_EXIST
    assert guard.decide("mainpage") is Decision.UNKNOWN


def test_decisions_are_idempotent() -> None:
    guard = _guard(["known_key"], ["nstab-"])
    for key in ["known_key", "nstab-main", "other"]:
        assert len({guard.decide(key) for _ in range(3)}) == 1


def test_observers_notified_only_on_short_circuit() -> None:
    observer = MagicMock()
    guard = _guard(["known_key"], ["nstab-"], observers=[observer])
    guard.decide("known_key")
    guard.decide("other")
    guard.decide("nstab-main")
    observer.on_message_skipped.assert_called_once_with("nstab-main")


def test_failing_observer_does_not_change_decision() -> None:
    broken = MagicMock()
    broken.on_message_skipped.side_effect = RuntimeError("log full")
    healthy = MagicMock()
    guard = _guard([], ["nstab-"], observers=[broken, healthy])
    assert guard.decide("nstab-main") is Decision.DOES_NOT_EXIST
    healthy.on_message_skipped.assert_called_once_with("nstab-main")


def test_internal_error_degrades_to_unknown() -> None:
    registry = MagicMock()
    registry.is_known.side_effect = RuntimeError("unexpected")
    guard = MessageCacheGuard(registry, PrefixMatcher(["nstab-"]))
    assert guard.decide("nstab-main") is Decision.UNKNOWN
    assert guard.on_message_cache_get("nstab-main") is True


def test_decision_short_circuits_flag() -> None:
    assert Decision.DOES_NOT_EXIST.short_circuits is True
    assert Decision.EXISTS.short_circuits is False
    assert Decision.UNKNOWN.short_circuits is False
    assert Decision.values() == ["exists", "does_not_exist", "unknown"]


def test_classify_matches_decide_without_notifying() -> None:
    observer = MagicMock()
    guard = _guard(["known_key"], ["nstab-"], observers=[observer])
    for key in ["known_key", "nstab-main", "other"]:
        assert guard.classify(key) is guard.decide(key)
    observer.on_message_skipped.assert_called_once_with("nstab-main")


def test_registry_per_locale() -> None:
    catalog = InMemoryCatalogProvider(
        {"en": {"tooltip-search": "Search"}, "de": {"tooltip-suche": "Suche"}}
    )
    registries = KnownKeyRegistryPool(catalog)
    guard = MessageCacheGuard(
        registries.for_locale("en"), PrefixMatcher(["tooltip-"]), registries=registries
    )
    assert guard.decide("tooltip-search") is Decision.EXISTS
    assert guard.decide("tooltip-search", locale="de") is Decision.DOES_NOT_EXIST
    assert guard.decide("tooltip-suche", locale="de") is Decision.EXISTS
    assert guard.registry_for("de") is registries.for_locale("de")
    assert registries.locales() == ["en", "de"]


def test_without_pool_every_locale_uses_default_registry() -> None:
    guard = _guard(["tooltip-search"], ["tooltip-"])
    assert guard.registry_for("de") is guard.registry
    assert guard.decide("tooltip-search", locale="de") is Decision.EXISTS
