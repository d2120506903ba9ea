"""JSON file catalog provider.

Reads one file per locale, <catalog_path>/<locale>.json, holding a flat
object of message key -> text (the usual i18n/*.json layout). Entries whose
key starts with "@" (e.g. "@metadata") are not messages and are skipped.
Each file is read once per process. A locale whose file cannot be read is
remembered as unavailable: list_message_keys raises the same error again and
get_message_text returns None, without touching the disk.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from msgcache.domain.exceptions import CatalogUnavailableException
from msgcache.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)

_METADATA_PREFIX = "@"


class JsonCatalogProvider:
    """Catalog backed by a directory of <locale>.json files."""

    def __init__(self, catalog_path: str | Path) -> None:
        """Initialize provider.

        Args:
            catalog_path: Directory holding <locale>.json files.
        """
        self.catalog_path = Path(catalog_path)
        self._messages: dict[str, dict[str, str]] = {}
        self._failures: dict[str, CatalogUnavailableException] = {}
        self._lock = threading.Lock()

    @traced("catalog.list_message_keys")
    def list_message_keys(self, locale: str) -> list[str]:
        """Return every message key defined for locale.

        Raises:
            CatalogUnavailableException: File missing, unreadable or not a JSON object.
        """
        keys = list(self._load(locale))
        add_span_attributes(**{"catalog.locale": locale, "catalog.key_count": len(keys)})
        return keys

    def get_message_text(self, locale: str, key: str) -> str | None:
        """Return default text for key, or None if the key or the locale is unavailable."""
        try:
            return self._load(locale).get(key)
        except CatalogUnavailableException:
            return None

    def _load(self, locale: str) -> dict[str, str]:
        messages = self._messages.get(locale)
        if messages is not None:
            return messages
        with self._lock:
            messages = self._messages.get(locale)
            if messages is not None:
                return messages
            failure = self._failures.get(locale)
            if failure is not None:
                raise failure.with_traceback(None)
            try:
                messages = self._read_file(locale)
            except CatalogUnavailableException as e:
                self._failures[locale] = e
                raise
            self._messages[locale] = messages
            return messages

    def _read_file(self, locale: str) -> dict[str, str]:
        if not locale or "/" in locale or "\\" in locale or locale.startswith("."):
            raise CatalogUnavailableException(locale, "invalid locale")
        path = self.catalog_path / f"{locale}.json"
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogUnavailableException(locale, f"missing file {path}") from e
        except (OSError, ValueError) as e:
            raise CatalogUnavailableException(locale, str(e)) from e
        if not isinstance(raw, dict):
            raise CatalogUnavailableException(locale, f"{path} is not a JSON object")
        messages = {
            str(key): str(text)
            for key, text in raw.items()
            if not str(key).startswith(_METADATA_PREFIX)
        }
        logger.debug("Read %d messages from %s", len(messages), path)
        return messages
