"""Shared constants.

Names of the built-in entity factory and the environment variables that
configure factory selection.
"""

from __future__ import annotations

DEFAULT_ENTITY_FACTORY: str = "default"
"""Registry name of the built-in ``EntityFactory``."""

ENV_ENTITY_FACTORY: str = "GEOJSON_ENTITY_FACTORY"
"""Environment variable naming the entity factory to resolve by default."""
