"""GeoJSON entity model.

In-memory representation of GeoJSON ``Feature`` and ``FeatureCollection``
values, independent of any particular geometry library. Codec code builds
and inspects entities only through an entity factory, so an alternative
entity representation can be swapped in by supplying a different factory.
"""

from geojson_entities.factories import (
    BaseEntityFactory,
    EntityFactory,
    get_entity_factory,
    list_entity_factories,
    register_entity_factory,
)
from geojson_entities.models import Feature, FeatureCollection

__version__ = "0.1.0"

__all__ = [
    "BaseEntityFactory",
    "EntityFactory",
    "Feature",
    "FeatureCollection",
    "get_entity_factory",
    "list_entity_factories",
    "register_entity_factory",
]
