"""
Pipeline module: orchestration, GeoJSON output, and the one-call facade.

- orchestrator.py: SearchOrchestrator (geocode -> bbox -> search per category)
- features.py: FeatureCollection for map renderers
- facade.py: search_nearby() convenience function
"""

from ngo_nearby.pipeline.orchestrator import SearchOrchestrator
from ngo_nearby.pipeline.features import build_feature_collection
from ngo_nearby.pipeline.facade import search_nearby

__all__ = [
    "SearchOrchestrator",
    "build_feature_collection",
    "search_nearby",
]
