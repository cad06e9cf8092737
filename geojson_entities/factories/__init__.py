"""Entity factories.

Every interaction between codec code and the entity model goes through an
entity factory:
- BaseEntityFactory: Abstract capability set every factory implements
- EntityFactory: Default factory producing Feature / FeatureCollection
- registry: Name-based factory selection, driven by configuration
"""

from geojson_entities.factories.base import BaseEntityFactory
from geojson_entities.factories.default import EntityFactory
from geojson_entities.factories.registry import (
    DEFAULT_FACTORY,
    get_entity_factory,
    list_entity_factories,
    register_entity_factory,
)

__all__ = [
    "DEFAULT_FACTORY",
    "BaseEntityFactory",
    "EntityFactory",
    "get_entity_factory",
    "list_entity_factories",
    "register_entity_factory",
]
