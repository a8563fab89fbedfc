"""
NGO nearby-places search.

Resolves '<name>, <address line>, <city>' records to coordinates and
collects points of interest of configured categories around each one.

Usage:
    from ngo_nearby import search_nearby, build_feature_collection

    results = await search_nearby(["Helping Hands, 123 Main St, Springfield"])
    geojson = build_feature_collection(results)
"""

from ngo_nearby.models import (
    BoundingBox,
    Coordinate,
    LocationRecord,
    LocationSummary,
    NgoSearchResult,
    Place,
    PlaceCategory,
)
from ngo_nearby.pipeline import SearchOrchestrator, build_feature_collection, search_nearby

__version__ = "1.0.0"
__all__ = [
    "BoundingBox",
    "Coordinate",
    "LocationRecord",
    "LocationSummary",
    "NgoSearchResult",
    "Place",
    "PlaceCategory",
    "SearchOrchestrator",
    "build_feature_collection",
    "search_nearby",
]
