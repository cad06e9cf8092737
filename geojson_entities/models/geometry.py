"""Geometry comparison and display helpers.

Entities never interpret their geometry; they only compare it and show it.
Two comparison notions are supported because geometry libraries usually
have two:

- *strict* equality is the geometry's ``==``. For shapely geometries this
  is exact structural equality (same type, same coordinates in the same
  order) and agrees with ``hash()``.
- *loose* equality is the geometry's ``equals()`` method where it has one.
  For shapely this is topological equality, so a line string and its
  reversal are loosely but not strictly equal.

Any object can act as a geometry; geometries without an ``equals()``
method compare loosely with ``==``.
"""

from __future__ import annotations

from typing import Any


def geometries_equal_strict(a: Any, b: Any) -> bool:
    """Return whether two geometries are strictly (canonically) equal."""
    if a is None or b is None:
        return a is None and b is None
    return bool(a == b)


def geometries_equal_loose(a: Any, b: Any) -> bool:
    """Return whether two geometries are equal under value semantics."""
    if a is None or b is None:
        return a is None and b is None
    equals = getattr(a, "equals", None)
    if callable(equals):
        try:
            return bool(equals(b))
        except (TypeError, AttributeError):
            # b is not a geometry of the same library.
            pass
    return bool(a == b)


def geometry_text(geometry: Any) -> str:
    """Return a short text form of a geometry (WKT where available)."""
    if geometry is None:
        return "None"
    wkt = getattr(geometry, "wkt", None)
    if isinstance(wkt, str):
        return wkt
    return repr(geometry)
