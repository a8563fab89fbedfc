"""
Shared utility functions for the nearby-places search.

Modules:
- geo: Bounding boxes and great-circle distance
- records: Parsing raw batch entries

Usage:
    from ngo_nearby.core.utils import build_bounding_box, parse_location_record
"""

from ngo_nearby.core.utils.geo import (
    DEFAULT_MARGIN_DEGREES,
    build_bounding_box,
    haversine_distance,
)
from ngo_nearby.core.utils.records import (
    parse_location_record,
    read_records,
)

__all__ = [
    # Geo utilities
    "DEFAULT_MARGIN_DEGREES",
    "build_bounding_box",
    "haversine_distance",
    # Record utilities
    "parse_location_record",
    "read_records",
]
