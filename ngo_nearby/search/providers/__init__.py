"""
Place search provider implementations.
"""

from ngo_nearby.search.providers.mapbox import MapboxPlaceSearcher, feature_to_place

__all__ = ["MapboxPlaceSearcher", "feature_to_place"]
