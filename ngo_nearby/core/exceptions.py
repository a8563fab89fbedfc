"""
Exceptions raised by the provider clients and configuration layer.

Provider failures never travel past the boundary operations
(`BaseGeocoder.geocode`, `BasePlaceSearcher.search`); the raising variants
(`resolve`, `fetch`) are for callers that need to tell the kinds apart.
"""


class NearbySearchError(Exception):
    """Base exception for all ngo-nearby errors."""
    pass


class ServiceError(NearbySearchError):
    """Raised on transport failure, non-2xx response, or malformed payload."""

    def __init__(self, message: str, provider: str = "", query: str = ""):
        self.message = message
        self.provider = provider
        self.query = query
        super().__init__(f"[{provider}] {message}" if provider else message)


class LocationNotFound(NearbySearchError):
    """Raised when the geocoder returns no features for a query."""

    def __init__(self, query: str, provider: str = ""):
        self.query = query
        self.provider = provider
        message = f"No features for '{query}'"
        super().__init__(f"[{provider}] {message}" if provider else message)


class ConfigurationError(NearbySearchError):
    """Raised when configuration is invalid or incomplete."""
    pass
