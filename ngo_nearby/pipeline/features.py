"""
GeoJSON output for map renderers.

Each search result becomes one "main" point at the geocoded location
followed by one point per nearby place. The `type` property carries the
category key (or "main") so the renderer can pick marker styling.
"""

from typing import Any, Dict, List, Sequence

from ngo_nearby.models import Coordinate, NgoSearchResult

MAIN_FEATURE_TYPE = "main"


def point_feature(coordinates: Coordinate, properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": coordinates.as_list,
        },
        "properties": properties,
    }


def result_features(result: NgoSearchResult) -> List[Dict[str, Any]]:
    """Features for one result: the main location first, then its places by category."""
    features = [
        point_feature(result.coordinates, {
            "type": MAIN_FEATURE_TYPE,
            "name": result.name,
            "location": f"{result.location.name}, {result.location.city}",
        })
    ]

    for key, places in result.nearby_places.items():
        for place in places:
            features.append(point_feature(place.coordinates, {
                "type": key,
                "id": place.id,
                "name": place.name,
                "location": place.address,
                "category": place.category,
            }))

    return features


def build_feature_collection(results: Sequence[NgoSearchResult]) -> Dict[str, Any]:
    """
    Build a GeoJSON FeatureCollection from search results.

    Args:
        results: Output of SearchOrchestrator.run()

    Returns:
        GeoJSON FeatureCollection dictionary
    """
    features = []
    for result in results:
        features.extend(result_features(result))

    return {
        "type": "FeatureCollection",
        "features": features,
    }
