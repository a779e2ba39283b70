#!/usr/bin/env python3
"""
Tests for application configuration.

Tests cover:
- Defaults
- Field validation
- Loading from environment variables
- merge_with overrides
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from clima.cli.config import ClimaConfig
from clima.openmeteo.client import FORECAST_API_URL, GEOCODING_API_URL
from clima.store.recent import RECENT_LOCATIONS_FILE


class TestConfigCreation:
    """Test configuration creation and defaults."""

    def test_default_config_creation(self, monkeypatch, tmp_path):
        """Test that config can be created with default values."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        config = ClimaConfig()

        assert config.geocoding_url == GEOCODING_API_URL
        assert config.forecast_url == FORECAST_API_URL
        assert config.request_timeout is None
        assert config.search_count == 10
        assert config.config_dir == tmp_path / "clima"
        assert config.debug_log == Path("dev/debug.log")

    def test_recent_path(self, tmp_path):
        """Test that the recent list lives inside the config directory."""
        config = ClimaConfig(config_dir=tmp_path)
        assert config.recent_path == tmp_path / RECENT_LOCATIONS_FILE

    def test_home_directory_expansion(self):
        """Test that ~ is expanded in config_dir."""
        config = ClimaConfig(config_dir="~/clima-test")
        assert config.config_dir == Path.home() / "clima-test"


class TestFieldValidation:
    """Test field validation."""

    @pytest.mark.parametrize("count", [0, 101, -5])
    def test_search_count_range(self, count):
        """Test that search_count is limited to 1..100."""
        with pytest.raises(ValidationError):
            ClimaConfig(search_count=count)

    def test_timeout_must_be_positive(self):
        """Test that a zero timeout is rejected."""
        with pytest.raises(ValidationError):
            ClimaConfig(request_timeout=0)

    def test_validate_assignment(self):
        """Test that assignments are validated too."""
        config = ClimaConfig()
        with pytest.raises(ValidationError):
            config.search_count = 0


class TestEnvironmentVariables:
    """Test loading configuration from environment."""

    def test_from_env_basic(self, monkeypatch):
        """Test that CLIMA_* variables are picked up and converted."""
        monkeypatch.setenv("CLIMA_SEARCH_COUNT", "5")
        monkeypatch.setenv("CLIMA_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("CLIMA_FORECAST_URL", "http://localhost:8080/v1/forecast")

        config = ClimaConfig.from_env()

        assert config.search_count == 5
        assert config.request_timeout == 2.5
        assert config.forecast_url == "http://localhost:8080/v1/forecast"
        assert config.geocoding_url == GEOCODING_API_URL

    def test_from_env_path_fields(self, monkeypatch, tmp_path):
        """Test that path variables become Path objects."""
        monkeypatch.setenv("CLIMA_CONFIG_DIR", str(tmp_path / "conf"))
        monkeypatch.setenv("CLIMA_DEBUG_LOG", str(tmp_path / "log.txt"))

        config = ClimaConfig.from_env()

        assert config.config_dir == tmp_path / "conf"
        assert config.debug_log == tmp_path / "log.txt"

    def test_from_env_timeout_none(self, monkeypatch):
        """Test that 'none' disables the timeout."""
        monkeypatch.setenv("CLIMA_REQUEST_TIMEOUT", "none")
        assert ClimaConfig.from_env().request_timeout is None

    def test_from_env_with_custom_prefix(self, monkeypatch):
        """Test that a custom prefix is honoured."""
        monkeypatch.setenv("MYAPP_SEARCH_COUNT", "3")
        monkeypatch.setenv("CLIMA_SEARCH_COUNT", "7")

        assert ClimaConfig.from_env(prefix="MYAPP_").search_count == 3

    def test_from_env_invalid_value(self, monkeypatch):
        """Test that an out-of-range value fails validation."""
        monkeypatch.setenv("CLIMA_SEARCH_COUNT", "500")
        with pytest.raises(ValidationError):
            ClimaConfig.from_env()


class TestMergeWith:
    """Test merge_with overrides."""

    def test_merge_with_single_override(self):
        """Test overriding one field."""
        config = ClimaConfig().merge_with(search_count=20)
        assert config.search_count == 20

    def test_merge_with_preserves_original(self, tmp_path):
        """Test that the original config is unchanged."""
        original = ClimaConfig(config_dir=tmp_path)
        merged = original.merge_with(request_timeout=10.0)

        assert original.request_timeout is None
        assert merged.request_timeout == 10.0
        assert merged.config_dir == tmp_path
