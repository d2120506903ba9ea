"""Lookup statistics endpoint."""

from fastapi import APIRouter

from msgcache.api.v1.dependencies import LookupServiceDep, SkippedLogDep
from msgcache.schemas.message import LookupStatsResponse

router = APIRouter()


@router.get("", response_model=LookupStatsResponse)
def lookup_stats(
    lookup_service: LookupServiceDep, skipped_log: SkippedLogDep
) -> LookupStatsResponse:
    """Return lookup counters; includes skipped key counts when debug output is enabled."""
    snapshot = lookup_service.stats.snapshot()
    return LookupStatsResponse(
        lookups=snapshot.lookups,
        short_circuited=snapshot.short_circuited,
        store_hits=snapshot.store_hits,
        store_misses=snapshot.store_misses,
        skipped_messages=skipped_log.counts() if skipped_log is not None else None,
    )
