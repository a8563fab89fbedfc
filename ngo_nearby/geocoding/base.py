"""
Base classes and interfaces for geocoding providers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ngo_nearby.core.exceptions import LocationNotFound, ServiceError
from ngo_nearby.models import Coordinate

logger = logging.getLogger(__name__)


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - resolve(): Geocode a single query, raising on failure
    - provider_name: Name of the provider

    geocode() is the boundary used by the pipeline: it never raises, and
    "no match" and "provider failed" both come back as None. The two cases
    are logged at different levels so they can still be told apart in logs.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @abstractmethod
    async def resolve(self, query: str) -> Coordinate:
        """
        Geocode free text into a coordinate.

        Args:
            query: Free-text location, e.g. "123 Main St, Springfield"

        Returns:
            Coordinate of the provider's best match

        Raises:
            LocationNotFound: If the provider has no match
            ServiceError: If the provider could not be reached or answered garbage
        """
        pass

    async def geocode(self, query: str) -> Optional[Coordinate]:
        """
        Geocode free text, absorbing every provider failure.

        Args:
            query: Free-text location

        Returns:
            Coordinate if found, None if not found or if the provider failed
        """
        try:
            return await self.resolve(query)
        except LocationNotFound:
            logger.warning(f"{self.provider_name}: Location not found: {query}")
            return None
        except ServiceError as e:
            logger.error(f"{self.provider_name}: Error geocoding {query}: {e}")
            return None
