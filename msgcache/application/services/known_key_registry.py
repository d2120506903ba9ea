"""Known message key registry.

Holds the set of message keys defined by code/extensions for a locale,
loaded lazily from the catalog provider on first use and kept for the rest
of the process. Catalog failures fail open: the set becomes empty and the
lookup path keeps working without the optimization for known keys.
"""

from __future__ import annotations

import logging
import threading

from msgcache.application.interfaces.services import ICatalogProvider

logger = logging.getLogger(__name__)


class KnownKeyRegistry:
    """Lazily loaded, immutable set of known message keys for one locale.

    The first is_known() call fetches the catalog under a lock; concurrent
    first callers wait for that fetch instead of repeating it. The frozenset
    is published by a single assignment, so readers never see a partially
    populated set. There is no invalidation: a process restart is the only reset.
    """

    def __init__(self, provider: ICatalogProvider, locale: str) -> None:
        """Initialize registry.

        Args:
            provider: Catalog provider listing defined message keys.
            locale: Locale (language code) whose keys are loaded.
        """
        self._provider = provider
        self._locale = locale
        self._keys: frozenset[str] | None = None
        self._lock = threading.Lock()

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def is_loaded(self) -> bool:
        """Return True once the catalog fetch has run (successfully or not)."""
        return self._keys is not None

    @property
    def size(self) -> int:
        """Number of known keys (loads the catalog on first access)."""
        return len(self._get_keys())

    def is_known(self, key: str) -> bool:
        """Return True if key is defined by the host's catalog for this locale."""
        return key in self._get_keys()

    def _get_keys(self) -> frozenset[str]:
        keys = self._keys
        if keys is not None:
            return keys
        with self._lock:
            if self._keys is None:
                self._keys = self._fetch()
            return self._keys

    def _fetch(self) -> frozenset[str]:
        """Fetch keys from the provider; return an empty set on any failure."""
        try:
            keys = self._provider.list_message_keys(self._locale)
            if keys is None:
                logger.warning(
                    "Catalog returned no message keys for locale %s; known-key set is empty",
                    self._locale,
                )
                return frozenset()
            loaded = frozenset(keys)
        except Exception as e:
            logger.warning(
                "Failed to load message keys for locale %s: %s. Known-key set is empty.",
                self._locale,
                e,
            )
            return frozenset()
        logger.info(
            "Loaded %d known message keys for locale %s", len(loaded), self._locale
        )
        return loaded


class KnownKeyRegistryPool:
    """Per-locale KnownKeyRegistry instances sharing one catalog provider.

    Registries are created on first request for a locale; each keeps its own
    once-only load.
    """

    def __init__(self, provider: ICatalogProvider) -> None:
        self._provider = provider
        self._registries: dict[str, KnownKeyRegistry] = {}
        self._lock = threading.Lock()

    def for_locale(self, locale: str) -> KnownKeyRegistry:
        """Return the registry for locale, creating it on first use."""
        registry = self._registries.get(locale)
        if registry is not None:
            return registry
        with self._lock:
            registry = self._registries.get(locale)
            if registry is None:
                registry = KnownKeyRegistry(self._provider, locale)
                self._registries[locale] = registry
            return registry

    def locales(self) -> list[str]:
        """Return locales that have a registry, in creation order."""
        with self._lock:
            return list(self._registries)
