"""Tests for JSON and in-memory catalog providers and CatalogFactory."""

from pathlib import Path

import pytest

from msgcache.core.config import Settings
from msgcache.domain.exceptions import CatalogUnavailableException
from msgcache.infrastructure.catalog import (
    CatalogFactory,
    InMemoryCatalogProvider,
    JsonCatalogProvider,
)


class TestJsonCatalogProvider:
    """Reads <locale>.json once; skips @metadata."""

    def test_lists_keys_without_metadata(self, catalog_dir: Path) -> None:
        provider = JsonCatalogProvider(catalog_dir)
        keys = provider.list_message_keys("en")
        assert "known_key" in keys
        assert "tooltip-search" in keys
        assert "@metadata" not in keys

    def test_message_text(self, catalog_dir: Path) -> None:
        provider = JsonCatalogProvider(catalog_dir)
        assert provider.get_message_text("de", "mainpage") == "Hauptseite"
        assert provider.get_message_text("de", "tooltip-search") is None

    def test_missing_locale_raises(self, catalog_dir: Path) -> None:
        provider = JsonCatalogProvider(catalog_dir)
        with pytest.raises(CatalogUnavailableException) as exc_info:
            provider.list_message_keys("xx")
        assert exc_info.value.details == {"locale": "xx"}

    def test_non_object_file_raises(self, catalog_dir: Path) -> None:
        with pytest.raises(CatalogUnavailableException):
            JsonCatalogProvider(catalog_dir).list_message_keys("broken")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogUnavailableException):
            JsonCatalogProvider(tmp_path).list_message_keys("en")

    @pytest.mark.parametrize("locale", ["../en", "", ".hidden", "a/b"])
    def test_path_like_locale_rejected(self, catalog_dir: Path, locale: str) -> None:
        with pytest.raises(CatalogUnavailableException):
            JsonCatalogProvider(catalog_dir).list_message_keys(locale)

    def test_file_read_once(self, tmp_path: Path) -> None:
        path = tmp_path / "en.json"
        path.write_text('{"a": "A"}', encoding="utf-8")
        provider = JsonCatalogProvider(tmp_path)
        assert provider.list_message_keys("en") == ["a"]
        path.write_text('{"b": "B"}', encoding="utf-8")
        assert provider.list_message_keys("en") == ["a"]

    def test_unavailable_locale_is_remembered(self, tmp_path: Path) -> None:
        provider = JsonCatalogProvider(tmp_path)
        with pytest.raises(CatalogUnavailableException):
            provider.list_message_keys("en")
        # Appearing later does not matter: the failure holds for the process.
        (tmp_path / "en.json").write_text('{"a": "A"}', encoding="utf-8")
        with pytest.raises(CatalogUnavailableException) as exc_info:
            provider.list_message_keys("en")
        assert exc_info.value.details == {"locale": "en"}
        assert provider.get_message_text("en", "a") is None

    def test_message_text_for_unavailable_locale_is_none(self, catalog_dir: Path) -> None:
        provider = JsonCatalogProvider(catalog_dir)
        assert provider.get_message_text("broken", "a") is None
        assert provider.get_message_text("xx", "a") is None


class TestInMemoryCatalogProvider:
    def test_lookup(self) -> None:
        provider = InMemoryCatalogProvider({"en": {"a": "A"}})
        assert provider.list_message_keys("de") == []
        assert provider.list_message_keys("en") == ["a"]
        assert provider.get_message_text("en", "a") == "A"
        assert provider.get_message_text("fr", "a") is None


class TestCatalogFactory:
    def test_json_backend(self, catalog_dir: Path) -> None:
        settings = Settings(catalog_backend="json", catalog_path=str(catalog_dir))
        provider = CatalogFactory.create_catalog_provider(settings)
        assert isinstance(provider, JsonCatalogProvider)

    def test_memory_backend(self) -> None:
        settings = Settings(catalog_backend="memory", catalog_path="")
        assert isinstance(
            CatalogFactory.create_catalog_provider(settings), InMemoryCatalogProvider
        )
