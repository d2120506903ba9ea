"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready (known-key set loaded)."""

    status: str = Field(default="ok", description="Readiness status")
    locale: str = Field(..., description="Locale of the known-key set")
    known_keys: int = Field(..., description="Number of known message keys (0 if catalog unavailable)")
    prefixes: int = Field(..., description="Number of configured message prefixes")
    store_available: bool = Field(..., description="True if the downstream message store is connected")
