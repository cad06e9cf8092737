"""Shared pytest fixtures for the GeoJSON entities test suite."""

from collections.abc import Iterator

import pytest
from shapely.geometry import LineString, Point

from geojson_entities.factories.default import EntityFactory

# ---------------------------------------------------------------------------
# Geometry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def point() -> Point:
    """A simple point geometry."""
    return Point(1, 2)


@pytest.fixture()
def other_point() -> Point:
    """A point distinct from ``point``."""
    return Point(3, 4)


@pytest.fixture()
def line() -> LineString:
    """A two-vertex line string."""
    return LineString([(0, 0), (1, 1)])


@pytest.fixture()
def reversed_line() -> LineString:
    """``line`` with its vertex order reversed (topologically equal)."""
    return LineString([(1, 1), (0, 0)])


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def factory() -> Iterator[EntityFactory]:
    """A fresh shared default factory, reset after the test."""
    EntityFactory.reset_instance()
    yield EntityFactory.instance()
    EntityFactory.reset_instance()
