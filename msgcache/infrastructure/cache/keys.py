"""Cache key builders. Single place for key format.

Key components (tenant_id, locale) must not contain CACHE_KEY_SEP to avoid
ambiguous or colliding keys. The message key is the last component and may
contain anything.
"""

from msgcache.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_MESSAGE


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def message_key(tenant_id: str, locale: str, key: str) -> str:
    """Cache key for a tenant's customized message text."""
    _validate_key_component(tenant_id, "tenant_id")
    _validate_key_component(locale, "locale")
    return (
        f"{CACHE_PREFIX_MESSAGE}{CACHE_KEY_SEP}{tenant_id}{CACHE_KEY_SEP}"
        f"{locale}{CACHE_KEY_SEP}{key}"
    )
