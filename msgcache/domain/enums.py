"""Domain enumerations for message cache performance.

Enums represent fixed sets of domain values (e.g. lookup decision).
"""

from enum import Enum


class Decision(str, Enum):
    """Outcome of the short-circuit check for a single message key.

    EXISTS and UNKNOWN both let normal message resolution continue; only
    DOES_NOT_EXIST short-circuits the downstream lookup.
    """

    EXISTS = "exists"
    DOES_NOT_EXIST = "does_not_exist"
    UNKNOWN = "unknown"

    @property
    def short_circuits(self) -> bool:
        """Return True when the lookup must be aborted as nonexistent."""
        return self is Decision.DOES_NOT_EXIST

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid decision values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [decision.value for decision in cls]
