"""
Health check endpoints.
"""

from fastapi import APIRouter, Depends

from api.config import api_settings
from api.dependencies import get_settings
from ngo_nearby.core import Settings

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": api_settings.API_TITLE}


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """Detailed health check."""
    return {
        "status": "ok",
        "service": api_settings.API_TITLE,
        "version": api_settings.API_VERSION,
        "dependencies": {
            "mapbox": settings.validate_mapbox(),
        },
        "categories": [c.key for c in settings.categories],
    }
