"""BaseEntityFactory abstract base class.

Defines the capability set every entity factory must provide. Codec code
(decoders building features, encoders reading them back) interacts
exclusively with this interface. It never constructs entities directly or
reaches into their fields, so a factory backed by a different entity
representation can be substituted without changing the codec.

Entities returned by an alternative factory need not subclass (or even
resemble) ``Feature`` / ``FeatureCollection``; only the factory has to
understand them.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable, Mapping


class BaseEntityFactory(abc.ABC):
    """Abstract base class for entity factories.

    Example usage::

        factory = get_entity_factory()
        feature = factory.feature(point, "A", {"category": "park"})
        collection = factory.feature_collection([feature])
        ids = factory.map_feature_collection(collection, factory.get_feature_id)
    """

    @property
    def name(self) -> str:
        """Human-readable factory name (defaults to the class name)."""
        return type(self).__name__

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def feature(
        self,
        geometry: Any,
        id: Hashable | None = None,  # noqa: A002
        properties: Mapping[Any, Any] | None = None,
    ) -> Any:
        """Create a feature.

        Args:
            geometry: Geometry value, may be ``None``.
            id: Feature identifier, may be ``None``.
            properties: Property map; ``None`` is treated as empty.
        """

    @abc.abstractmethod
    def feature_collection(self, features: Iterable[object] = ()) -> Any:
        """Create a feature collection.

        Entries this factory does not recognise as features are dropped.
        """

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def is_feature(self, obj: object) -> bool:
        """Whether ``obj`` is a feature created by this factory."""

    @abc.abstractmethod
    def is_feature_collection(self, obj: object) -> bool:
        """Whether ``obj`` is a feature collection created by this factory."""

    @abc.abstractmethod
    def map_feature_collection(
        self,
        collection: Any,
        fn: Callable[[Any], Any],
    ) -> list[Any]:
        """Apply ``fn`` to each feature, returning results in collection order."""

    @abc.abstractmethod
    def get_feature_geometry(self, feature: Any) -> Any:
        """Return the feature's geometry, or ``None``."""

    @abc.abstractmethod
    def get_feature_id(self, feature: Any) -> Any:
        """Return the feature's id, or ``None``."""

    @abc.abstractmethod
    def get_feature_properties(self, feature: Any) -> dict[str, Any]:
        """Return a copy of the feature's properties.

        Editing the returned dict must not change the feature.
        """
