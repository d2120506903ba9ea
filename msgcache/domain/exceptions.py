"""Domain exceptions for message cache performance.

Defines domain-level exceptions independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
None of these escape the per-request decision path; the decision engine
degrades to "proceed normally" instead.
"""

from typing import Any


class MessageCacheException(Exception):
    """Base exception for all message cache performance errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, locale).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(MessageCacheException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidPrefixConfigurationException(MessageCacheException):
    """Raised at construction time when a configured prefix is not a string."""

    def __init__(self, index: int, value: Any) -> None:
        """Initialize with the offending position and value.

        Args:
            index: Position of the entry in the configured prefix list.
            value: The non-string entry.
        """
        super().__init__(
            f"Message prefix at index {index} must be a string, got {type(value).__name__}",
            "INVALID_PREFIX_CONFIGURATION",
            {"index": index, "type": type(value).__name__},
        )


class CatalogUnavailableException(MessageCacheException):
    """Raised by catalog providers when the message catalog cannot be read."""

    def __init__(self, locale: str, reason: str | None = None) -> None:
        """Initialize with the locale that failed and an optional reason.

        Args:
            locale: Locale whose catalog could not be loaded.
            reason: Optional description of the underlying failure.
        """
        message = f"Message catalog unavailable for locale: {locale}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, "CATALOG_UNAVAILABLE", {"locale": locale})


class MessageNotFoundException(MessageCacheException):
    """Raised when a message key does not resolve to any text."""

    def __init__(self, key: str, short_circuited: bool = False) -> None:
        """Initialize with the missing key.

        Args:
            key: Message key that was looked up.
            short_circuited: True if the lookup was aborted without touching the cache.
        """
        super().__init__(
            f"Message not found: {key}",
            "MESSAGE_NOT_FOUND",
            {"key": key, "short_circuited": short_circuited},
        )
