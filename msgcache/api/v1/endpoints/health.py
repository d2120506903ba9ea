"""Health check endpoints. Liveness has no dependencies; readiness loads the known-key set."""

from fastapi import APIRouter, Request

from msgcache.api.v1.dependencies import GuardDep
from msgcache.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(request: Request, guard: GuardDep) -> ReadinessResponse:
    """Return known-key and prefix counts.

    Triggers the lazy catalog load so the first real lookup does not pay
    for it. Always 200: an unavailable catalog yields known_keys=0 and the
    service keeps working without known-key exemptions.
    """
    cache = getattr(request.app.state, "cache", None)
    return ReadinessResponse(
        locale=guard.registry.locale,
        known_keys=guard.registry.size,
        prefixes=len(guard.matcher),
        store_available=cache is not None and cache.is_available(),
    )
