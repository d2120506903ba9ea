"""API v1: health and message lookup routes."""

from msgcache.api.v1.router import api_router

__all__ = ["api_router"]
