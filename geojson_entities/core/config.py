"""Configuration loaded from environment variables.

``from_env()`` raises ``ConfigValidationError`` for unusable values so bad
configuration is caught when it is loaded rather than at first use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geojson_entities.core.constants import DEFAULT_ENTITY_FACTORY, ENV_ENTITY_FACTORY
from geojson_entities.core.exceptions import ConfigurationError


class ConfigValidationError(ConfigurationError):
    """Raised when a configuration value is invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class EntityConfig:
    """Immutable entity model configuration.

    Attributes:
        entity_factory: Registry name of the entity factory that
            ``get_entity_factory()`` resolves when no name is given.
    """

    entity_factory: str = DEFAULT_ENTITY_FACTORY

    @classmethod
    def from_env(cls) -> EntityConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If ``GEOJSON_ENTITY_FACTORY`` is set
                to an empty (or whitespace-only) value.
        """
        config = cls(
            entity_factory=os.getenv(ENV_ENTITY_FACTORY, DEFAULT_ENTITY_FACTORY).strip(),
        )
        _validate(config)
        return config


def _validate(config: EntityConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    if not config.entity_factory:
        raise ConfigValidationError(
            ENV_ENTITY_FACTORY,
            config.entity_factory,
            "must not be empty",
        )
