"""Guarded message lookup: decision engine in front of the per-tenant message store.

The store (Redis) holds tenant customizations and is the expensive path;
the catalog supplies default text. Keys the guard reports as nonexistent
never reach either of them.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from msgcache.application.dtos.message import (
    MessageLookupResult,
    MessageLookupStatsSnapshot,
)
from msgcache.core.constants import DEFAULT_TENANT
from msgcache.domain.enums import Decision
from msgcache.domain.exceptions import ValidationException
from msgcache.shared.telemetry.tracing import add_span_event

if TYPE_CHECKING:
    from msgcache.application.interfaces.services import ICatalogProvider, IMessageStore
    from msgcache.application.services.message_cache_guard import MessageCacheGuard

logger = logging.getLogger(__name__)


def normalize_message_key(key: str) -> str:
    """Lower-case the first character of key (message keys are lcfirst by convention)."""
    return key[:1].lower() + key[1:]


class MessageLookupStats:
    """Thread-safe counters for guarded lookups."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._lookups = 0
        self._short_circuited = 0
        self._store_hits = 0
        self._store_misses = 0

    def record(self, short_circuited: bool = False, store_hit: bool | None = None) -> None:
        """Count one lookup; store_hit is None when the store was not consulted."""
        with self._lock:
            self._lookups += 1
            if short_circuited:
                self._short_circuited += 1
            if store_hit is True:
                self._store_hits += 1
            elif store_hit is False:
                self._store_misses += 1

    def snapshot(self) -> MessageLookupStatsSnapshot:
        with self._lock:
            return MessageLookupStatsSnapshot(
                lookups=self._lookups,
                short_circuited=self._short_circuited,
                store_hits=self._store_hits,
                store_misses=self._store_misses,
            )


class MessageLookupService:
    """Resolves message text for a tenant, skipping the store for nonexistent keys."""

    def __init__(
        self,
        guard: "MessageCacheGuard",
        catalog: "ICatalogProvider",
        locale: str,
        store: "IMessageStore | None" = None,
        stats: MessageLookupStats | None = None,
        cache_ttl: int | None = None,
        extra_locales: Iterable[str] = (),
    ) -> None:
        """Initialize service.

        Args:
            locale: Default locale.
            extra_locales: Other locales callers may select; any other
                requested locale resolves to the default.
        """
        self._guard = guard
        self._catalog = catalog
        self._locale = locale
        self._locales = tuple(dict.fromkeys([locale, *extra_locales]))
        self._store = store
        self._cache_ttl = cache_ttl
        self.stats = stats or MessageLookupStats()

    def attach_store(self, store: "IMessageStore | None") -> None:
        """Set (or detach, with None) the downstream store; called from the app lifespan."""
        self._store = store

    @property
    def locale(self) -> str:
        """Default locale, used when a call does not name one."""
        return self._locale

    @property
    def locales(self) -> tuple[str, ...]:
        """Served locales, default first."""
        return self._locales

    def resolve_locale(self, locale: str | None) -> str:
        """Return locale if it is served, else the default locale."""
        if locale and locale in self._locales:
            return locale
        return self._locale

    def classify(self, key: str, locale: str | None = None) -> Decision:
        """Return the guard decision for key as a query: nothing is recorded as skipped."""
        return self._guard.classify(normalize_message_key(key), self.resolve_locale(locale))

    async def get_message(
        self, key: str, tenant_id: str | None = None, locale: str | None = None
    ) -> MessageLookupResult:
        """Resolve key to text.

        Order: guard decision, tenant customization in the store, catalog default.

        Args:
            key: Message key as requested.
            tenant_id: Tenant whose customizations apply (None = default tenant).
            locale: Locale to resolve in (None = default locale).

        Returns:
            MessageLookupResult; text is None when the key does not resolve.
        """
        key = normalize_message_key(key)
        locale = self.resolve_locale(locale)
        decision = self._guard.decide(key, locale)
        if decision.short_circuits:
            self.stats.record(short_circuited=True)
            logger.debug("Message lookup short-circuited: %s", key)
            add_span_event("message.short_circuited", {"message.key": key})
            return MessageLookupResult(
                key=key, decision=decision, text=None, locale=locale
            )

        store_hit: bool | None = None
        store = self._store
        if store is not None and store.is_available():
            text = await store.get_message(tenant_id or DEFAULT_TENANT, locale, key)
            store_hit = text is not None
            if text is not None:
                self.stats.record(store_hit=True)
                return MessageLookupResult(
                    key=key, decision=decision, text=text, source="store", locale=locale
                )

        self.stats.record(store_hit=store_hit)
        text = self._catalog_text(locale, key)
        return MessageLookupResult(
            key=key,
            decision=decision,
            text=text,
            source="catalog" if text is not None else None,
            locale=locale,
        )

    async def customize_message(
        self,
        key: str,
        text: str,
        tenant_id: str | None = None,
        locale: str | None = None,
    ) -> bool:
        """Store a tenant customization for key.

        Raises:
            ValidationException: If key is one the guard reports as nonexistent
                (such keys cannot be customized).

        Returns:
            True if stored, False when the store is unavailable.
        """
        key = normalize_message_key(key)
        locale = self.resolve_locale(locale)
        if self._guard.classify(key, locale).short_circuits:
            raise ValidationException(
                f"Message {key!r} cannot be customized", field="key"
            )
        store = self._store
        if store is None or not store.is_available():
            return False
        return await store.set_message(
            tenant_id or DEFAULT_TENANT, locale, key, text, ttl=self._cache_ttl
        )

    def _catalog_text(self, locale: str, key: str) -> str | None:
        try:
            return self._catalog.get_message_text(locale, key)
        except Exception as e:
            logger.warning("Catalog text lookup failed for %s: %s", key, e)
            return None
