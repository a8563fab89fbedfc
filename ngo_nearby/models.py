"""
Value objects passed through the geocode-then-search pipeline.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class LocationRecord:
    """One batch entry: '<name>, <address_line>, <city>'."""
    name: str
    address_line: str
    city: str

    @property
    def query(self) -> str:
        """Text sent to the geocoder."""
        return f"{self.address_line}, {self.city}"


@dataclass(frozen=True)
class Coordinate:
    """A point in WGS84 degrees, longitude first like the provider."""
    lng: float
    lat: float

    @property
    def as_list(self) -> List[float]:
        return [self.lng, self.lat]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle in longitude/latitude degrees."""
    west: float
    south: float
    east: float
    north: float

    @property
    def as_param(self) -> str:
        """Render as the provider's 'west,south,east,north' bbox parameter."""
        return ",".join(str(v) for v in (self.west, self.south, self.east, self.north))


@dataclass(frozen=True)
class PlaceCategory:
    """
    A configured POI category.

    `key` names the bucket in NgoSearchResult.nearby_places, `query` is the
    term sent to the place search endpoint (e.g. key "religious", query "temple").
    """
    key: str
    query: str


@dataclass(frozen=True)
class Place:
    """A POI returned by the place search endpoint."""
    id: str
    name: str
    address: str
    coordinates: Coordinate
    category: str

    @property
    def as_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "coordinates": self.coordinates.as_list,
            "category": self.category,
        }


@dataclass(frozen=True)
class LocationSummary:
    name: str
    city: str


@dataclass
class NgoSearchResult:
    """Nearby places found around one successfully geocoded record."""
    name: str
    location: LocationSummary
    coordinates: Coordinate
    nearby_places: Dict[str, List[Place]] = field(default_factory=dict)

    @property
    def as_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "location": {
                "name": self.location.name,
                "city": self.location.city,
            },
            "coordinates": self.coordinates.as_list,
            "nearbyPlaces": {
                key: [place.as_dict for place in places]
                for key, places in self.nearby_places.items()
            },
        }
