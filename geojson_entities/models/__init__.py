"""Entity models.

- Feature: Immutable (geometry, id, properties) value
- FeatureCollection: Immutable ordered sequence of Features
- geometry: Strict/loose geometry comparison helpers
"""

from geojson_entities.models.feature import Feature
from geojson_entities.models.feature_collection import FeatureCollection

__all__ = [
    "Feature",
    "FeatureCollection",
]
