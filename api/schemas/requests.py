"""
Request schemas for the nearby-places API.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request body for a nearby-places search."""

    records: List[str] = Field(
        ...,
        min_length=1,
        description="Records formatted '<name>, <address line>, <city>'"
    )
    categories: Optional[Dict[str, str]] = Field(
        None,
        description="Category key -> provider query; defaults to SEARCH_CATEGORIES",
        json_schema_extra={
            "example": {"restaurants": "restaurant", "religious": "temple"}
        }
    )
    concurrency: Optional[int] = Field(
        None,
        ge=1,
        le=16,
        description="Records processed at once; defaults to MAX_CONCURRENCY"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "records": [
                    "Helping Hands, 123 Main St, Springfield",
                    "Food Bank, 1 City Square, Worcester"
                ],
                "categories": {"restaurants": "restaurant", "religious": "temple"}
            }
        }
    }
