"""Catalog providers: source of truth for which message keys are defined.

JsonCatalogProvider reads <catalog_path>/<locale>.json; InMemoryCatalogProvider
is seeded in code (tests, embedding). CatalogFactory picks one from settings.
"""

from msgcache.infrastructure.catalog.factory import CatalogFactory
from msgcache.infrastructure.catalog.json_catalog import JsonCatalogProvider
from msgcache.infrastructure.catalog.memory_catalog import InMemoryCatalogProvider

__all__ = ["CatalogFactory", "InMemoryCatalogProvider", "JsonCatalogProvider"]
