"""
Geocoding provider implementations.
"""

from ngo_nearby.geocoding.providers.mapbox import MapboxGeocoder

__all__ = ["MapboxGeocoder"]
