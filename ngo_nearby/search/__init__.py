"""
Place search module: POIs of one category inside a bounding box.

Usage:
    from ngo_nearby.search import MapboxPlaceSearcher

    searcher = MapboxPlaceSearcher(settings.provider_config())
    places = await searcher.search(bbox, "restaurant")  # never raises
"""

from ngo_nearby.search.base import BasePlaceSearcher, DEFAULT_LIMIT
from ngo_nearby.search.providers.mapbox import MapboxPlaceSearcher

__all__ = [
    "BasePlaceSearcher",
    "DEFAULT_LIMIT",
    "MapboxPlaceSearcher",
]
