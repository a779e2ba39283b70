#!/usr/bin/env python3
"""
Configuration for the clima application.

Provides centralized configuration with support for:
- Environment variables (CLIMA_* prefix)
- Command-line overrides
- Validated defaults

Configuration priority (highest to lowest):
1. Command-line overrides
2. Environment variables
3. Hardcoded defaults
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from clima.openmeteo.client import FORECAST_API_URL, GEOCODING_API_URL
from clima.store.recent import RECENT_LOCATIONS_FILE, default_config_dir


class ClimaConfig(BaseModel):
    """
    Central configuration for clima.

    Endpoints, where the recent list lives, and where --debug writes its log.
    """

    # Endpoints
    geocoding_url: str = Field(
        default=GEOCODING_API_URL,
        description="Open-Meteo geocoding search endpoint"
    )
    forecast_url: str = Field(
        default=FORECAST_API_URL,
        description="Open-Meteo forecast endpoint"
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None waits indefinitely)"
    )

    # Search behaviour
    search_count: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of geocoding candidates requested"
    )

    # Paths
    config_dir: Path = Field(
        default_factory=default_config_dir,
        description="Per-user directory holding the recent locations file"
    )
    debug_log: Path = Field(
        default=Path("dev/debug.log"),
        description="Event log written when --debug is passed (relative to cwd)"
    )

    model_config = {
        "validate_assignment": True,
        "arbitrary_types_allowed": True,
    }

    @field_validator("config_dir", mode="before")
    @classmethod
    def expand_user(cls, v) -> Path:
        """Expand ``~`` so env values like ``~/.clima`` work."""
        if v is None:
            return v
        return Path(v).expanduser()

    @property
    def recent_path(self) -> Path:
        """Full path of the recent locations JSON file."""
        return self.config_dir / RECENT_LOCATIONS_FILE

    @classmethod
    def from_env(cls, prefix: str = "CLIMA_") -> "ClimaConfig":
        """
        Load configuration from environment variables.

        Environment variable format: {prefix}{FIELD_NAME}
        Example: CLIMA_SEARCH_COUNT=5, CLIMA_CONFIG_DIR=/tmp/clima

        Args:
            prefix: Prefix for environment variables (default: "CLIMA_")

        Returns:
            ClimaConfig instance with values from environment
        """
        config_dict = {}

        for field_name in cls.model_fields.keys():
            env_value = os.getenv(f"{prefix}{field_name.upper()}")
            if env_value is None:
                continue

            field_type = cls.model_fields[field_name].annotation
            if field_type is int:
                config_dict[field_name] = int(env_value)
            elif field_type is Path:
                config_dict[field_name] = Path(env_value)
            elif field_name == "request_timeout":
                config_dict[field_name] = None if env_value.lower() in ("", "none") else float(env_value)
            else:
                config_dict[field_name] = env_value

        return cls(**config_dict)

    def merge_with(self, **overrides) -> "ClimaConfig":
        """
        Create a new config with specified overrides.

        Args:
            **overrides: Field values to override

        Returns:
            New ClimaConfig instance with overrides applied
        """
        config_dict = self.model_dump()
        config_dict.update(overrides)
        return ClimaConfig(**config_dict)
