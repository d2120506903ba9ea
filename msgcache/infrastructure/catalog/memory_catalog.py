"""In-memory catalog provider (messages passed at construction)."""

from __future__ import annotations

import threading
from collections.abc import Mapping


class InMemoryCatalogProvider:
    """Catalog held in a dict of locale -> {key: text}."""

    def __init__(self, messages: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._lock = threading.Lock()
        self._messages: dict[str, dict[str, str]] = {
            locale: dict(entries) for locale, entries in (messages or {}).items()
        }

    def list_message_keys(self, locale: str) -> list[str]:
        with self._lock:
            return list(self._messages.get(locale, {}))

    def get_message_text(self, locale: str, key: str) -> str | None:
        with self._lock:
            return self._messages.get(locale, {}).get(key)
