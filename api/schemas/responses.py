"""
Response schemas for the nearby-places API.
"""

from typing import Any, Dict, List
from pydantic import BaseModel, Field


class PlaceResponse(BaseModel):
    """A point of interest near a searched location."""

    id: str = Field(..., description="Provider feature ID")
    name: str = Field(..., description="Display name")
    address: str = Field(..., description="Human-readable address")
    coordinates: List[float] = Field(..., description="[lng, lat]")
    category: str = Field(..., description="Provider category string")


class LocationResponse(BaseModel):
    """Address line and city of a searched record."""

    name: str = Field(..., description="Address line")
    city: str = Field(..., description="City")


class SearchResultResponse(BaseModel):
    """Nearby places around one geocoded record."""

    name: str = Field(..., description="NGO name")
    location: LocationResponse
    coordinates: List[float] = Field(..., description="Geocoded [lng, lat]")
    nearbyPlaces: Dict[str, List[PlaceResponse]] = Field(
        default_factory=dict, description="Places keyed by category"
    )


class SearchResponse(BaseModel):
    """Full search response."""

    results: List[SearchResultResponse] = Field(
        default_factory=list, description="One entry per geocoded record, in input order"
    )
    features: Dict[str, Any] = Field(..., description="GeoJSON FeatureCollection")
    requested: int = Field(..., ge=0, description="Records received")
    resolved: int = Field(..., ge=0, description="Records geocoded")
