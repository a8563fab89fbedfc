from typing import Dict, List, Optional

import pytest

from ngo_nearby.core.config import ProviderConfig
from ngo_nearby.core.exceptions import LocationNotFound, ServiceError
from ngo_nearby.geocoding.base import BaseGeocoder
from ngo_nearby.models import BoundingBox, Coordinate, Place, PlaceCategory
from ngo_nearby.search.base import BasePlaceSearcher, DEFAULT_LIMIT


def make_place(n: int, category: str = "restaurant") -> Place:
    return Place(
        id=f"poi.{n}",
        name=f"Place {n}",
        address=f"{n} Side St, Springfield",
        coordinates=Coordinate(lng=10.0 + n / 1000, lat=20.0 + n / 1000),
        category=category,
    )


def make_feature(n: int, category: str = "restaurant") -> dict:
    return {
        "id": f"poi.{n}",
        "text": f"Place {n}",
        "place_name": f"Place {n}, {n} Side St, Springfield",
        "center": [10.0 + n / 1000, 20.0 + n / 1000],
        "properties": {"category": category},
    }


class FakeGeocoder(BaseGeocoder):
    """Answers from a dict; "missing" raises LocationNotFound, "broken" ServiceError."""

    def __init__(self, answers: Dict[str, object]):
        self.answers = answers
        self.calls: List[str] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def resolve(self, query: str) -> Coordinate:
        self.calls.append(query)
        answer = self.answers.get(query, "missing")
        if answer == "missing":
            raise LocationNotFound(query, provider=self.provider_name)
        if answer == "broken":
            raise ServiceError("boom", provider=self.provider_name, query=query)
        return answer


class FakeSearcher(BasePlaceSearcher):
    """Returns canned places per category query; "broken" raises ServiceError."""

    def __init__(self, answers: Dict[str, object]):
        self.answers = answers
        self.calls: List[tuple] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def fetch(
        self,
        bbox: BoundingBox,
        category: str,
        limit: int = DEFAULT_LIMIT
    ) -> List[Place]:
        self.calls.append((bbox, category, limit))
        answer = self.answers.get(category, [])
        if answer == "broken":
            raise ServiceError("boom", provider=self.provider_name, query=category)
        return list(answer)


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(access_token="pk.test", base_url="https://example.test/geocode", timeout=5.0)


@pytest.fixture
def default_categories() -> List[PlaceCategory]:
    return [
        PlaceCategory(key="restaurants", query="restaurant"),
        PlaceCategory(key="religious", query="temple"),
    ]
