"""Message lookup API schemas."""

from pydantic import BaseModel, Field

from msgcache.domain.enums import Decision

MAX_DECISION_KEYS = 1000


class MessageResponse(BaseModel):
    """Response for GET /messages/{key}."""

    key: str = Field(..., description="Normalized message key")
    locale: str = Field(..., description="Locale the key was resolved in")
    text: str = Field(..., description="Resolved message text")
    decision: Decision = Field(..., description="Short-circuit decision for the key")
    source: str = Field(..., description="'store' (tenant customization) or 'catalog' (default)")


class MessageCustomizeRequest(BaseModel):
    """Request body for PUT /messages/{key}."""

    text: str = Field(..., description="Customized message text")


class MessageCustomizeResponse(BaseModel):
    """Response for PUT /messages/{key}."""

    key: str
    stored: bool = Field(..., description="False when the message store is unavailable")


class DecisionRequest(BaseModel):
    """Request body for POST /messages/decisions."""

    keys: list[str] = Field(..., max_length=MAX_DECISION_KEYS, description="Message keys to check")


class KeyDecision(BaseModel):
    """Decision for one key."""

    key: str
    decision: Decision
    short_circuit: bool = Field(..., description="True if the lookup would be aborted")


class DecisionResponse(BaseModel):
    """Response for POST /messages/decisions."""

    locale: str
    decisions: list[KeyDecision]


class LookupStatsResponse(BaseModel):
    """Response for GET /stats."""

    lookups: int
    short_circuited: int
    store_hits: int
    store_misses: int
    skipped_messages: dict[str, int] | None = Field(
        default=None,
        description="Process-wide skipped key counts (only when debug output is enabled)",
    )
