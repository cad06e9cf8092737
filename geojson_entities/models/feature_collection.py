"""Data model for a GeoJSON FeatureCollection.

An immutable, ordered sequence of ``Feature`` values. Construction is a
permissive filter: anything that is not a ``Feature`` is silently dropped
rather than rejected, so decoders can pass through partially recognised
input without special handling.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from geojson_entities.models.feature import Feature

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, init=False, eq=False, repr=False)
class FeatureCollection:
    """An ordered collection of features.

    Iteration is restartable: every ``each()`` / ``iter()`` call starts a
    fresh pass over the features in collection order.
    """

    _features: tuple[Feature, ...]

    def __init__(self, features: Iterable[object] | None = None) -> None:
        kept: list[Feature] = []
        dropped = 0
        for candidate in () if features is None else features:
            if isinstance(candidate, Feature):
                kept.append(candidate)
            else:
                dropped += 1
        if dropped:
            logger.debug("FeatureCollection dropped %d non-Feature entries", dropped)
        object.__setattr__(self, "_features", tuple(kept))

    def each(self) -> Iterator[Feature]:
        """Return a new iterator over the features."""
        return iter(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return self.each()

    def size(self) -> int:
        """Number of features in the collection."""
        return len(self._features)

    def __len__(self) -> int:
        return self.size()

    def index(self, i: object) -> Feature | None:
        """Return the feature at position ``i``, or ``None`` if out of range.

        Negative positions count from the end. Non-integer positions
        (slices included) also give ``None``.
        """
        try:
            return self._features[operator.index(i)]
        except (IndexError, TypeError):
            return None

    def __getitem__(self, i: object) -> Feature | None:
        return self.index(i)

    def equals_strict(self, other: object) -> bool:
        """Same features in the same order, compared with ``Feature.equals_strict``."""
        return (
            isinstance(other, FeatureCollection)
            and len(self._features) == len(other._features)
            and all(a.equals_strict(b) for a, b in zip(self._features, other._features))
        )

    def equals_loose(self, other: object) -> bool:
        """Same features in the same order, compared with ``Feature.equals_loose``."""
        return (
            isinstance(other, FeatureCollection)
            and len(self._features) == len(other._features)
            and all(a.equals_loose(b) for a, b in zip(self._features, other._features))
        )

    def __eq__(self, other: object) -> bool:
        return self.equals_strict(other)

    def __hash__(self) -> int:
        return hash(self._features)

    def __repr__(self) -> str:
        return f"FeatureCollection(size={len(self._features)})"

    __str__ = __repr__
