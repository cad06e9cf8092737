"""Data model for a GeoJSON Feature.

A Feature wraps one geometry together with an optional identifier and a
property map. It is an immutable value object: equality and hashing are
structural over the whole ``(geometry, id, properties)`` tuple.

This is the representation produced by the default ``EntityFactory``.
Codec code must not construct or inspect it directly; an alternative
factory may use an entirely different feature type.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any

from geojson_entities.models.geometry import (
    geometries_equal_loose,
    geometries_equal_strict,
    geometry_text,
)


def _freeze(value: Any) -> Hashable:
    """Return a hashable stand-in for a geometry, id or property value.

    Equal values map to equal stand-ins, so the result is safe to feed
    into ``hash()`` alongside ``==``-based equality.
    """
    if isinstance(value, Mapping):
        return frozenset((k, _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, bytearray):
        return bytes(value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    if isinstance(value, Hashable):
        try:
            hash(value)
        except TypeError:
            pass
        else:
            return value
    return type(value).__name__


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class Feature:
    """A single GeoJSON feature.

    Attributes:
        geometry: The wrapped geometry, or ``None``. Treated as immutable
            and returned without copying.
        id: Feature identifier (string, number, ...) or ``None``. Never
            interpreted, only compared and returned.
    """

    geometry: Any
    id: Hashable | None
    _properties: dict[str, Any]

    def __init__(
        self,
        geometry: Any = None,
        id: Hashable | None = None,  # noqa: A002
        properties: Mapping[Any, Any] | None = None,
    ) -> None:
        object.__setattr__(self, "geometry", geometry)
        object.__setattr__(self, "id", id)
        object.__setattr__(
            self,
            "_properties",
            {str(k): v for k, v in (properties or {}).items()},
        )

    @property
    def feature_id(self) -> Hashable | None:
        """Alias for ``id``."""
        return self.id

    @property
    def properties(self) -> dict[str, Any]:
        """Return a copy of the property map.

        Editing the returned dict does not change the feature.
        """
        return dict(self._properties)

    def property(self, key: Any) -> Any:
        """Return the value of the named property, or ``None`` if absent.

        Non-string keys are looked up by their ``str()`` form.
        """
        return self._properties.get(str(key))

    def __getitem__(self, key: Any) -> Any:
        return self.property(key)

    def keys(self) -> list[str]:
        """Return the known property keys."""
        return list(self._properties)

    def equals_strict(self, other: object) -> bool:
        """Compare geometry with its strict ``==`` plus id and properties."""
        return (
            isinstance(other, Feature)
            and geometries_equal_strict(self.geometry, other.geometry)
            and self.id == other.id
            and self._properties == other._properties
        )

    def equals_loose(self, other: object) -> bool:
        """Compare geometry with its loose ``equals()`` plus id and properties.

        May disagree with ``equals_strict`` when the geometry library's
        two equality notions diverge (e.g. reversed coordinate order).
        """
        return (
            isinstance(other, Feature)
            and geometries_equal_loose(self.geometry, other.geometry)
            and self.id == other.id
            and self._properties == other._properties
        )

    def __eq__(self, other: object) -> bool:
        return self.equals_strict(other)

    def __hash__(self) -> int:
        return hash((_freeze(self.geometry), _freeze(self.id), _freeze(self._properties)))

    def __repr__(self) -> str:
        return f"Feature(id={self.id!r}, geometry={geometry_text(self.geometry)!r})"

    __str__ = __repr__
