"""Tests for entity model configuration.

Covers:
- Default values
- Loading from environment variables
- Fail-fast validation
"""

from __future__ import annotations

import dataclasses
import os
from unittest.mock import patch

import pytest

from geojson_entities.core.config import ConfigValidationError, EntityConfig
from geojson_entities.core.exceptions import ConfigurationError


class TestEntityConfigDefaults:
    def test_default_factory(self) -> None:
        assert EntityConfig().entity_factory == "default"

    def test_frozen(self) -> None:
        cfg = EntityConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.entity_factory = "other"  # type: ignore[misc]


class TestEntityConfigFromEnv:
    """Verify loading from environment variables."""

    def test_unset_uses_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert EntityConfig.from_env().entity_factory == "default"

    def test_loads_from_environment(self) -> None:
        with patch.dict(os.environ, {"GEOJSON_ENTITY_FACTORY": "custom"}):
            assert EntityConfig.from_env().entity_factory == "custom"

    def test_strips_whitespace(self) -> None:
        with patch.dict(os.environ, {"GEOJSON_ENTITY_FACTORY": " custom \n"}):
            assert EntityConfig.from_env().entity_factory == "custom"


class TestEntityConfigValidation:
    """Invalid values fail at load time."""

    def test_empty_raises(self) -> None:
        with (
            patch.dict(os.environ, {"GEOJSON_ENTITY_FACTORY": ""}),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            EntityConfig.from_env()
        err = exc_info.value
        assert err.key == "GEOJSON_ENTITY_FACTORY"
        assert err.value == ""
        assert "must not be empty" in str(err)

    def test_is_configuration_error(self) -> None:
        err = ConfigValidationError("KEY", "v", "bad")
        assert isinstance(err, ConfigurationError)
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.to_error_dict()["category"] == "configuration"
