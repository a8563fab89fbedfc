"""
Geographic utility functions for bounding boxes and distance checks.

Usage:
    from ngo_nearby.core.utils.geo import build_bounding_box

    bbox = build_bounding_box(Coordinate(lng=-71.80, lat=42.26))
    # BoundingBox(west=-71.825, south=42.235, east=-71.775, north=42.285)
"""

import math

from ngo_nearby.models import BoundingBox, Coordinate

# Degrees added on each side of the searched point
DEFAULT_MARGIN_DEGREES = 0.025

EARTH_RADIUS_METERS = 6_371_000


def build_bounding_box(
    coord: Coordinate,
    margin: float = DEFAULT_MARGIN_DEGREES
) -> BoundingBox:
    """
    Build the search box around a coordinate.

    The margin is applied in degrees on both axes, so the box is square in
    degrees but narrower on the ground as latitude grows. This matches what
    the place search has always used.

    Args:
        coord: Center of the box
        margin: Half-width of the box in degrees

    Returns:
        BoundingBox with east - west == north - south == 2 * margin

    Example:
        >>> build_bounding_box(Coordinate(lng=10.0, lat=20.0))
        BoundingBox(west=9.975, south=19.975, east=10.025, north=20.025)
    """
    return BoundingBox(
        west=coord.lng - margin,
        south=coord.lat - margin,
        east=coord.lng + margin,
        north=coord.lat + margin,
    )


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate the great-circle distance between two points in meters.

    Uses the Haversine formula which gives accurate results for most distances.
    """
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    delta_phi = math.radians(b.lat - a.lat)
    delta_lambda = math.radians(b.lng - a.lng)

    h = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_METERS * c
