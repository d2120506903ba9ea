"""DTOs for guarded message lookups."""

from dataclasses import dataclass

from msgcache.domain.enums import Decision


@dataclass(frozen=True)
class MessageLookupResult:
    """Outcome of resolving one message key."""

    key: str
    decision: Decision
    text: str | None
    # "store" (tenant customization), "catalog" (default text) or None
    source: str | None = None
    locale: str | None = None

    @property
    def found(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class MessageLookupStatsSnapshot:
    """Point-in-time copy of lookup counters."""

    lookups: int
    short_circuited: int
    store_hits: int
    store_misses: int
