"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from msgcache.api.v1.dependencies.
"""

from fastapi import APIRouter

from msgcache.api.v1.endpoints import health, messages, stats

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
