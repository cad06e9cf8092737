"""Exception hierarchy.

The entity model itself never raises on malformed input: unknown elements
are dropped, missing values are ``None`` and foreign comparisons are
``False``. Errors only come from the surrounding layers (configuration
loading and entity factory resolution), and all of them inherit from
``EntityError``.

Every exception exposes ``to_error_dict()`` for a stable structured
payload suitable for logging.
"""

from __future__ import annotations


class EntityError(Exception):
    """Base exception for all geojson_entities errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. ``"UNKNOWN_ENTITY_FACTORY"``).
    """

    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""
    #: Category reported by ``to_error_dict``.
    category: str = "entity"

    def __init__(self, message: str = "", *, code: str = "") -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "message": self.message,
        }


class ConfigurationError(EntityError):
    """Invalid or missing configuration."""

    category = "configuration"
    default_code = "CONFIGURATION_INVALID"


class EntityFactoryError(EntityError):
    """An entity factory could not be resolved or is unusable.

    Attributes:
        factory: Registry name of the factory involved.
    """

    category = "factory"
    default_code = "ENTITY_FACTORY_FAILED"

    def __init__(self, message: str = "", *, factory: str = "", code: str = "") -> None:
        self.factory = factory
        super().__init__(message, code=code)

    def to_error_dict(self) -> dict[str, object]:
        payload = super().to_error_dict()
        payload["factory"] = self.factory
        return payload


class UnknownEntityFactoryError(EntityFactoryError):
    """No entity factory is registered under the requested name."""

    default_code = "UNKNOWN_ENTITY_FACTORY"
