"""
Mapbox POI search provider.

Uses the geocoding endpoint with a category term, restricted to `poi`
features inside a bounding box.
https://docs.mapbox.com/api/search/geocoding-v5/
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp

from ngo_nearby.core.config import ProviderConfig
from ngo_nearby.core.exceptions import ServiceError
from ngo_nearby.core.http import JsonHttpClient
from ngo_nearby.geocoding.providers.mapbox import feature_list, parse_center
from ngo_nearby.models import BoundingBox, Place
from ngo_nearby.search.base import BasePlaceSearcher, DEFAULT_LIMIT

logger = logging.getLogger(__name__)


def feature_to_place(feature: Dict[str, Any], provider: str = "mapbox") -> Place:
    """
    Map a provider POI feature into a Place.

    id <- id, name <- text, address <- place_name, coordinates <- center,
    category <- properties.category. Missing or null text fields become "".

    Raises:
        ServiceError: If the feature is not an object or has no usable center
    """
    if not isinstance(feature, dict):
        raise ServiceError(f"Malformed feature: {feature!r}", provider=provider)

    properties = feature.get("properties")
    if not isinstance(properties, dict):
        properties = {}

    return Place(
        id=str(feature.get("id") or ""),
        name=str(feature.get("text") or ""),
        address=str(feature.get("place_name") or ""),
        coordinates=parse_center(feature, provider=provider),
        category=str(properties.get("category") or ""),
    )


class MapboxPlaceSearcher(BasePlaceSearcher):
    """
    Mapbox POI search inside a bounding box.

    Usage:
        searcher = MapboxPlaceSearcher(settings.provider_config())
        places = await searcher.search(bbox, "restaurant", limit=50)
    """

    def __init__(
        self,
        config: ProviderConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.http = JsonHttpClient(config, session=session, provider=self.provider_name)

    @property
    def provider_name(self) -> str:
        return "mapbox"

    async def fetch(
        self,
        bbox: BoundingBox,
        category: str,
        limit: int = DEFAULT_LIMIT
    ) -> List[Place]:
        params = {
            "bbox": bbox.as_param,
            "types": "poi",
            "limit": limit,
        }

        data = await self.http.get_json(f"{quote(category, safe='')}.json", params)
        features = feature_list(data, provider=self.provider_name)

        places = [
            feature_to_place(feature, provider=self.provider_name)
            for feature in features[:limit]
        ]

        logger.debug(f"Mapbox: {len(places)} '{category}' places in {bbox.as_param}")
        return places
