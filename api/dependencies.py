"""
FastAPI dependencies for the nearby-places API.

Provides dependency injection for settings.
"""

from functools import lru_cache

from fastapi import Depends, HTTPException

from ngo_nearby.core import Settings, load_settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings once per process as a FastAPI dependency.

    Usage:
        @router.get("/config")
        async def show(settings: Settings = Depends(get_settings)):
            return {"limit": settings.SEARCH_LIMIT}
    """
    return load_settings()


def require_mapbox(settings: Settings = Depends(get_settings)) -> Settings:
    """
    Get settings, raising 503 if the Mapbox token is not configured.
    """
    if not settings.validate_mapbox():
        raise HTTPException(
            status_code=503,
            detail="MAPBOX_ACCESS_TOKEN not configured"
        )
    return settings
