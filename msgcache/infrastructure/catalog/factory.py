"""Catalog provider factory: creates the JSON or in-memory backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from msgcache.application.interfaces.services import ICatalogProvider

if TYPE_CHECKING:
    from msgcache.core.config import Settings


class CatalogFactory:
    """Factory for catalog provider instances based on configuration."""

    @staticmethod
    def create_catalog_provider(settings: "Settings | None" = None) -> ICatalogProvider:
        """Create catalog provider from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            JsonCatalogProvider or InMemoryCatalogProvider.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from msgcache.core.config import get_settings

        s = settings or get_settings()
        backend = s.catalog_backend.lower()

        if backend == "json":
            from msgcache.infrastructure.catalog.json_catalog import JsonCatalogProvider

            if not s.catalog_path:
                raise ValueError("MCP_CATALOG_PATH required for json backend")
            return JsonCatalogProvider(s.catalog_path)
        if backend == "memory":
            from msgcache.infrastructure.catalog.memory_catalog import (
                InMemoryCatalogProvider,
            )

            return InMemoryCatalogProvider()
        raise ValueError(f"Unknown catalog backend: {s.catalog_backend!r}")
