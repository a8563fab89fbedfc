"""
Base classes and interfaces for place search providers.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ngo_nearby.core.exceptions import ServiceError
from ngo_nearby.models import BoundingBox, Place

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50


class BasePlaceSearcher(ABC):
    """
    Abstract base class for POI search providers.

    Subclasses must implement:
    - fetch(): Query one category inside a bounding box, raising on failure
    - provider_name: Name of the provider

    search() is the boundary used by the pipeline. It never raises and never
    returns more than `limit` places; a failed search looks like an empty one
    to the caller and is only distinguishable in the logs.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the search provider."""
        pass

    @abstractmethod
    async def fetch(
        self,
        bbox: BoundingBox,
        category: str,
        limit: int = DEFAULT_LIMIT
    ) -> List[Place]:
        """
        Search POIs of one category inside a bounding box.

        Args:
            bbox: Area to search
            category: Provider category query, e.g. "restaurant"
            limit: Maximum number of places requested

        Returns:
            Places in provider order

        Raises:
            ServiceError: If the provider could not be reached or answered garbage
        """
        pass

    async def search(
        self,
        bbox: BoundingBox,
        category: str,
        limit: int = DEFAULT_LIMIT
    ) -> List[Place]:
        """
        Search POIs, absorbing provider failures.

        Returns:
            At most `limit` places in provider order; [] on failure
        """
        try:
            places = await self.fetch(bbox, category, limit=limit)
        except ServiceError as e:
            logger.error(
                f"{self.provider_name}: Error searching '{category}' in bbox "
                f"{bbox.as_param}: {e}"
            )
            return []

        return places[:limit]
