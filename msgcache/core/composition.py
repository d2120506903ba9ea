"""Composition root: builds the decision engine and lookup service from settings.

Used by msgcache.main.create_app() and by scripts. Components are built
once and passed explicitly to whatever serves requests. Each served locale
gets its own known-key set, loaded lazily on its first lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from msgcache.application.services.known_key_registry import KnownKeyRegistryPool
from msgcache.application.services.message_cache_guard import MessageCacheGuard
from msgcache.application.services.prefix_matcher import PrefixMatcher
from msgcache.application.services.skipped_message_log import (
    ProcessSkippedMessageRecorder,
    RequestSkippedMessageRecorder,
    SkippedMessageLog,
)
from msgcache.application.use_cases.message_lookup import MessageLookupService
from msgcache.infrastructure.catalog.factory import CatalogFactory

if TYPE_CHECKING:
    from msgcache.application.interfaces.services import ICatalogProvider
    from msgcache.core.config import Settings


@dataclass(frozen=True)
class MessageCacheComponents:
    """Everything a request handler needs, built once per process."""

    catalog: "ICatalogProvider"
    guard: MessageCacheGuard
    lookup_service: MessageLookupService
    # Process-wide skipped key counts; None unless debug output is enabled.
    skipped_messages: SkippedMessageLog | None


def build_components(
    settings: "Settings",
    catalog: "ICatalogProvider | None" = None,
) -> MessageCacheComponents:
    """Build catalog, guard and lookup service from settings.

    Args:
        settings: Application settings (prefixes, locale, debug flag, catalog).
        catalog: Optional provider override (tests, embedding); else from CatalogFactory.

    Raises:
        InvalidPrefixConfigurationException: A configured prefix is not a string.
    """
    if catalog is None:
        catalog = CatalogFactory.create_catalog_provider(settings)
    matcher = PrefixMatcher(settings.msg_prefixes)
    registries = KnownKeyRegistryPool(catalog)
    registry = registries.for_locale(settings.language_code)

    observers: list = [RequestSkippedMessageRecorder()]
    skipped_messages: SkippedMessageLog | None = None
    if settings.enable_debug:
        process_recorder = ProcessSkippedMessageRecorder()
        skipped_messages = process_recorder.log
        observers.append(process_recorder)

    guard = MessageCacheGuard(
        registry, matcher, observers=observers, registries=registries
    )
    lookup_service = MessageLookupService(
        guard=guard,
        catalog=catalog,
        locale=settings.language_code,
        cache_ttl=settings.cache_ttl_messages,
        extra_locales=settings.extra_locales,
    )
    return MessageCacheComponents(
        catalog=catalog,
        guard=guard,
        lookup_service=lookup_service,
        skipped_messages=skipped_messages,
    )
