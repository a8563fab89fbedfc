"""
Pydantic schemas for API request/response models.
"""

from api.schemas.requests import SearchRequest
from api.schemas.responses import (
    PlaceResponse,
    LocationResponse,
    SearchResultResponse,
    SearchResponse,
)

__all__ = [
    "SearchRequest",
    "PlaceResponse",
    "LocationResponse",
    "SearchResultResponse",
    "SearchResponse",
]
