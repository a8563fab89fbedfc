"""
API routers for the nearby-places API.
"""

from api.routers.health import router as health_router
from api.routers.search import router as search_router

__all__ = ["health_router", "search_router"]
