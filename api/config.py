"""
API configuration module.

Centralizes all configuration for the nearby-places API.
"""

import os


class APISettings:
    """API-specific settings; provider settings live in ngo_nearby.core.config."""

    API_TITLE = "NGO Nearby Places API"
    API_DESCRIPTION = "Geocode NGO locations and find points of interest around them"
    API_VERSION = "1.0.0"

    # CORS settings
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
    CORS_ALLOW_CREDENTIALS = True
    CORS_ALLOW_METHODS = ["*"]
    CORS_ALLOW_HEADERS = ["*"]

    # Upper bound on records accepted by one request
    MAX_RECORDS_PER_REQUEST = int(os.getenv("MAX_RECORDS_PER_REQUEST", "100"))


api_settings = APISettings()
