"""Entity factory registry: selects the active entity factory by name.

Alternative entity representations are plugged in by registering a loader
under a name and selecting that name, either explicitly or through the
``GEOJSON_ENTITY_FACTORY`` environment variable.

Usage::

    from geojson_entities.factories.registry import get_entity_factory

    factory = get_entity_factory()
    feature = factory.feature(geometry, "A", {"category": "park"})
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from geojson_entities.core.config import EntityConfig
from geojson_entities.core.constants import DEFAULT_ENTITY_FACTORY
from geojson_entities.core.exceptions import EntityFactoryError, UnknownEntityFactoryError
from geojson_entities.factories.base import BaseEntityFactory
from geojson_entities.factories.default import EntityFactory

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_FACTORY = DEFAULT_ENTITY_FACTORY

# Each entry maps a factory name to a zero-argument callable returning the
# factory to use. Loaders decide themselves whether to share an instance.
_FACTORY_REGISTRY: dict[str, Callable[[], BaseEntityFactory]] = {}
_registry_lock = threading.Lock()


def _ensure_registry() -> None:
    """Register the built-in default factory once (idempotent)."""
    with _registry_lock:
        _FACTORY_REGISTRY.setdefault(DEFAULT_FACTORY, EntityFactory.instance)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_entity_factory(
    name: str,
    loader: Callable[[], BaseEntityFactory],
) -> None:
    """Register an entity factory loader, replacing any previous one.

    Args:
        name: Factory name (e.g. ``"pygeos_backed"``).
        loader: A zero-argument callable returning the factory.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Entity factory name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    with _registry_lock:
        _FACTORY_REGISTRY[name] = loader
    logger.debug("Registered entity factory: %s", name)


def get_entity_factory(name: str | None = None) -> BaseEntityFactory:
    """Resolve an entity factory by name.

    Args:
        name: Registered factory name. If ``None``, the name is taken from
            ``EntityConfig.from_env()``.

    Raises:
        ConfigValidationError: If ``name`` is ``None`` and the environment
            configuration is invalid.
        UnknownEntityFactoryError: If no factory is registered under the name.
        EntityFactoryError: If the loader does not return a ``BaseEntityFactory``.
    """
    if name is None:
        name = EntityConfig.from_env().entity_factory

    _ensure_registry()
    with _registry_lock:
        loader = _FACTORY_REGISTRY.get(name)
        available = ", ".join(sorted(_FACTORY_REGISTRY))

    if loader is None:
        msg = f"Unknown entity factory: {name!r}. Available: {available}"
        raise UnknownEntityFactoryError(msg, factory=name)

    factory = loader()
    if not isinstance(factory, BaseEntityFactory):
        msg = f"Loader for entity factory {name!r} returned {type(factory).__name__}, not an entity factory"
        raise EntityFactoryError(msg, factory=name)

    logger.debug("Resolved entity factory %s -> %s", name, factory.name)
    return factory


def list_entity_factories() -> list[str]:
    """Return the names of all registered entity factories."""
    _ensure_registry()
    with _registry_lock:
        return sorted(_FACTORY_REGISTRY)
