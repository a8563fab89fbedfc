"""
Nearby-places search endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.config import api_settings
from api.dependencies import require_mapbox
from api.schemas.requests import SearchRequest
from api.schemas.responses import SearchResponse, SearchResultResponse
from ngo_nearby.core import ConfigurationError, Settings
from ngo_nearby.models import PlaceCategory
from ngo_nearby.pipeline import build_feature_collection, search_nearby

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Search"])


@router.post("/search", response_model=SearchResponse)
async def search_endpoint(
    request: SearchRequest,
    settings: Settings = Depends(require_mapbox)
):
    """
    Geocode each record and search the configured categories around it.

    Records that cannot be geocoded are left out of `results`; compare
    `requested` and `resolved` to see how many were dropped.
    """
    if len(request.records) > api_settings.MAX_RECORDS_PER_REQUEST:
        raise HTTPException(
            status_code=422,
            detail=f"At most {api_settings.MAX_RECORDS_PER_REQUEST} records per request"
        )

    categories = None
    if request.categories is not None:
        categories = []
        seen = set()
        for key, query in request.categories.items():
            key = key.strip()
            if not key:
                raise HTTPException(status_code=422, detail="Category keys must not be empty")
            if key in seen:
                raise HTTPException(status_code=422, detail=f"Duplicate category key: '{key}'")
            seen.add(key)
            categories.append(PlaceCategory(key=key, query=query.strip() or key))

    try:
        results = await search_nearby(
            request.records,
            settings=settings,
            categories=categories,
            concurrency=request.concurrency,
        )
    except ConfigurationError as e:
        logger.error(f"Search configuration error: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    return SearchResponse(
        results=[SearchResultResponse(**r.as_dict) for r in results],
        features=build_feature_collection(results),
        requested=len(request.records),
        resolved=len(results),
    )
