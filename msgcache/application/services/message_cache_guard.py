"""Short-circuit decision for message cache lookups.

Lookups for messages that are not defined in code and not customized still
cost a cache round-trip (memcached/APCu/Redis) per key, multiplied across
tenants and keys. MessageCacheGuard reports the most common such keys as
nonexistent before the cache is touched:

1. key defined by the catalog        -> EXISTS (proceed normally)
2. key starts with a known prefix    -> DOES_NOT_EXIST (short-circuit)
3. anything else                     -> UNKNOWN (proceed normally)

Known keys always win over prefix matches. The decision path never raises:
internal faults degrade to UNKNOWN.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from msgcache.application.interfaces.services import ISkippedMessageObserver
from msgcache.application.services.known_key_registry import (
    KnownKeyRegistry,
    KnownKeyRegistryPool,
)
from msgcache.application.services.prefix_matcher import PrefixMatcher
from msgcache.domain.enums import Decision

logger = logging.getLogger(__name__)


class MessageCacheGuard:
    """Decision engine composing the known-key registry and the prefix matcher.

    Built once (see msgcache.main.create_app) and shared by every request;
    both collaborators are read-only after their first use.
    """

    def __init__(
        self,
        registry: KnownKeyRegistry,
        matcher: PrefixMatcher,
        observers: Iterable[ISkippedMessageObserver] = (),
        registries: KnownKeyRegistryPool | None = None,
    ) -> None:
        """Initialize guard.

        Args:
            registry: Known message keys for the default locale.
            matcher: Literal prefixes of non-customizable, nonexistent keys.
            observers: Notified after each DOES_NOT_EXIST decision (diagnostics only).
            registries: Per-locale registries for lookups in other locales;
                without it every locale uses registry.
        """
        self.registry = registry
        self.matcher = matcher
        self.registries = registries
        self._observers = tuple(observers)

    def registry_for(self, locale: str | None = None) -> KnownKeyRegistry:
        """Return the known-key registry for locale (None = default locale)."""
        if locale is None or locale == self.registry.locale or self.registries is None:
            return self.registry
        return self.registries.for_locale(locale)

    def classify(self, key: str, locale: str | None = None) -> Decision:
        """Return the short-circuit decision for key without notifying observers.

        For queries about a key (batch checks, write validation) as opposed
        to an actual message lookup.

        Args:
            key: Message key (lower-cased upstream by convention).
            locale: Locale whose known keys apply (None = default locale).

        Returns:
            EXISTS, DOES_NOT_EXIST or UNKNOWN.
        """
        try:
            if self.registry_for(locale).is_known(key):
                # Message is known to exist in code - nothing to do.
                return Decision.EXISTS
            if self.matcher.matches(key):
                # Known to not exist in code and cannot be customized.
                return Decision.DOES_NOT_EXIST
        except Exception:
            logger.exception("Message cache guard failed for key %r; proceeding normally", key)
        return Decision.UNKNOWN

    def decide(self, key: str, locale: str | None = None) -> Decision:
        """Return the decision for a message lookup; short-circuits are reported to observers."""
        decision = self.classify(key, locale)
        if decision is Decision.DOES_NOT_EXIST:
            self._notify_skipped(key)
        return decision

    def on_message_cache_get(self, key: str, locale: str | None = None) -> bool:
        """Lookup hook for the message resolution pipeline.

        Returns:
            False to abort the lookup (key does not exist), True to continue.
        """
        return not self.decide(key, locale).short_circuits

    def _notify_skipped(self, key: str) -> None:
        for observer in self._observers:
            try:
                observer.on_message_skipped(key)
            except Exception:
                logger.exception(
                    "Skipped-message observer %s failed for key %r",
                    type(observer).__name__,
                    key,
                )
