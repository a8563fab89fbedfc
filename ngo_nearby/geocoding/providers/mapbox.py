"""
Mapbox Geocoding API provider.

Forward geocoding of free-text addresses.
https://docs.mapbox.com/api/search/geocoding-v5/
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp

from ngo_nearby.core.config import ProviderConfig
from ngo_nearby.core.exceptions import LocationNotFound, ServiceError
from ngo_nearby.core.http import JsonHttpClient
from ngo_nearby.geocoding.base import BaseGeocoder
from ngo_nearby.models import Coordinate

logger = logging.getLogger(__name__)


def parse_center(feature: Dict[str, Any], provider: str = "mapbox") -> Coordinate:
    """
    Read a feature's `center` ([lng, lat]) into a Coordinate.

    Raises:
        ServiceError: If the center is missing or not two numbers
    """
    center = feature.get("center") if isinstance(feature, dict) else None
    try:
        lng, lat = center
        return Coordinate(lng=float(lng), lat=float(lat))
    except (TypeError, ValueError):
        raise ServiceError(f"Malformed feature center: {center!r}", provider=provider)


def feature_list(data: Dict[str, Any], provider: str = "mapbox") -> List[Dict[str, Any]]:
    """
    Return the `features` array of a provider response.

    Raises:
        ServiceError: If the response has no features array
    """
    features = data.get("features")
    if not isinstance(features, list):
        raise ServiceError("Response has no 'features' array", provider=provider)
    return features


class MapboxGeocoder(BaseGeocoder):
    """
    Mapbox forward geocoder.

    Takes the first returned feature as the answer; an empty feature list
    means the location is unknown.

    Usage:
        geocoder = MapboxGeocoder(settings.provider_config())
        coord = await geocoder.geocode("123 Main St, Springfield")
    """

    def __init__(
        self,
        config: ProviderConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize Mapbox Geocoder.

        Args:
            config: Provider token, base URL and timeout
            session: Shared aiohttp session (one per request if omitted)
        """
        self.http = JsonHttpClient(config, session=session, provider=self.provider_name)

    @property
    def provider_name(self) -> str:
        return "mapbox"

    async def resolve(self, query: str) -> Coordinate:
        """
        Geocode a query using the Mapbox geocoding endpoint.

        Args:
            query: Free-text location

        Returns:
            Coordinate of the first feature
        """
        data = await self.http.get_json(f"{quote(query, safe='')}.json")
        features = feature_list(data, provider=self.provider_name)

        if not features:
            raise LocationNotFound(query, provider=self.provider_name)

        coord = parse_center(features[0], provider=self.provider_name)
        logger.debug(f"Mapbox: {query} -> {coord.lng:.6f}, {coord.lat:.6f}")
        return coord
