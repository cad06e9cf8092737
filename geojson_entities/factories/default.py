"""Default entity factory.

Creates ``Feature`` and ``FeatureCollection`` objects. The factory holds no
state of its own; a single shared instance is available through
``EntityFactory.instance()``.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, ClassVar

from geojson_entities.factories.base import BaseEntityFactory
from geojson_entities.models.feature import Feature
from geojson_entities.models.feature_collection import FeatureCollection

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Mapping

logger = logging.getLogger(__name__)


class EntityFactory(BaseEntityFactory):
    """Entity factory producing ``Feature`` / ``FeatureCollection``."""

    _instance: ClassVar[EntityFactory | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def instance(cls) -> EntityFactory:
        """Return the process-wide factory, creating it on first use."""
        factory = cls.__dict__.get("_instance")
        if factory is None:
            with cls._instance_lock:
                factory = cls.__dict__.get("_instance")
                if factory is None:
                    factory = cls()
                    cls._instance = factory
                    logger.debug("Created shared entity factory: %s", factory.name)
        return factory

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared factory so the next ``instance()`` builds a new one."""
        with cls._instance_lock:
            cls._instance = None

    def feature(
        self,
        geometry: Any,
        id: Hashable | None = None,  # noqa: A002
        properties: Mapping[Any, Any] | None = None,
    ) -> Feature:
        return Feature(geometry, id, properties)

    def feature_collection(self, features: Iterable[object] = ()) -> FeatureCollection:
        return FeatureCollection(features)

    def is_feature(self, obj: object) -> bool:
        return isinstance(obj, Feature)

    def is_feature_collection(self, obj: object) -> bool:
        return isinstance(obj, FeatureCollection)

    def map_feature_collection(
        self,
        collection: FeatureCollection,
        fn: Callable[[Feature], Any],
    ) -> list[Any]:
        return [fn(feature) for feature in collection.each()]

    def get_feature_geometry(self, feature: Feature) -> Any:
        return feature.geometry

    def get_feature_id(self, feature: Feature) -> Hashable | None:
        return feature.id

    def get_feature_properties(self, feature: Feature) -> dict[str, Any]:
        return feature.properties
