"""
Core module providing shared configuration, errors, HTTP access, and utilities.

- Configuration management (Settings, ProviderConfig, environment variables)
- Exception hierarchy shared by the provider clients
- JSON HTTP client for the provider endpoint
- Utility functions (geo, record parsing)

Usage:
    from ngo_nearby.core import load_settings, ServiceError
    from ngo_nearby.core.utils import build_bounding_box, parse_location_record
"""

from ngo_nearby.core.config import (
    Settings,
    ProviderConfig,
    load_settings,
    parse_categories,
)
from ngo_nearby.core.exceptions import (
    NearbySearchError,
    ServiceError,
    LocationNotFound,
    ConfigurationError,
)
from ngo_nearby.core.http import JsonHttpClient

__all__ = [
    "Settings",
    "ProviderConfig",
    "load_settings",
    "parse_categories",
    "NearbySearchError",
    "ServiceError",
    "LocationNotFound",
    "ConfigurationError",
    "JsonHttpClient",
]
