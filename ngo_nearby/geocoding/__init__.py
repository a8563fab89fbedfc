"""
Geocoding module: free-text location descriptions to coordinates.

Usage:
    from ngo_nearby.geocoding import MapboxGeocoder

    geocoder = MapboxGeocoder(settings.provider_config())
    coord = await geocoder.geocode("123 Main St, Springfield")  # Coordinate or None
"""

from ngo_nearby.geocoding.base import BaseGeocoder
from ngo_nearby.geocoding.providers.mapbox import MapboxGeocoder

__all__ = [
    "BaseGeocoder",
    "MapboxGeocoder",
]
