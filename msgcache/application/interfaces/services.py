"""Service interfaces (ports) for the application layer.

Protocols define contracts for the collaborators of the decision engine
and of the guarded message lookup (DIP).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


# Localisation catalog interface
class ICatalogProvider(Protocol):
    """Protocol for the host's localisation catalog (source of truth for defined keys)."""

    def list_message_keys(self, locale: str) -> Iterable[str]:
        """Return every message key defined by code/extensions for locale.

        May raise CatalogUnavailableException (or anything else); callers on
        the lookup path must fail open.
        """

    def get_message_text(self, locale: str, key: str) -> str | None:
        """Return the default (non-customized) text for key, or None if undefined."""


# Downstream message store interface
class IMessageStore(Protocol):
    """Protocol for the expensive per-tenant store of customized messages (e.g. Redis)."""

    def is_available(self) -> bool:
        """Return True if the store is connected and usable."""

    async def get_message(self, tenant_id: str, locale: str, key: str) -> str | None:
        """Return customized text for key, or None on miss/unavailable."""

    async def set_message(
        self, tenant_id: str, locale: str, key: str, text: str, ttl: int | None = None
    ) -> bool:
        """Store customized text for key. Returns True on success."""


# Diagnostic observer interface
class ISkippedMessageObserver(Protocol):
    """Protocol for observers notified after a key was short-circuited."""

    def on_message_skipped(self, key: str) -> None:
        """Record that key was reported as nonexistent without a cache lookup."""
