"""Domain layer: decision enum and exceptions. No infrastructure imports."""

from msgcache.domain.enums import Decision
from msgcache.domain.exceptions import (
    CatalogUnavailableException,
    InvalidPrefixConfigurationException,
    MessageCacheException,
    MessageNotFoundException,
    ValidationException,
)

__all__ = [
    "CatalogUnavailableException",
    "Decision",
    "InvalidPrefixConfigurationException",
    "MessageCacheException",
    "MessageNotFoundException",
    "ValidationException",
]
