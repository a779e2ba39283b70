"""
Open-Meteo Data Models.

Typed records for the two payloads the application consumes:

- Location: one geocoding match, also the unit stored in the recent list
- ForecastSnapshot: current conditions plus daily series, with units

Both are immutable pydantic models. The forecast keeps the raw key/value
mappings from the API so a missing or malformed field only affects that field.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CurrentVariable(str, Enum):
    """Variables the forecast API can return for current conditions."""

    TEMPERATURE_2M = "temperature_2m"
    RELATIVE_HUMIDITY_2M = "relative_humidity_2m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    IS_DAY = "is_day"
    WEATHER_CODE = "weather_code"
    CLOUD_COVER = "cloud_cover"
    PRESSURE_MSL = "pressure_msl"
    SURFACE_PRESSURE = "surface_pressure"
    PRECIPITATION = "precipitation"
    RAIN = "rain"
    SHOWERS = "showers"
    SNOWFALL = "snowfall"
    WIND_SPEED_10M = "wind_speed_10m"
    WIND_DIRECTION_10M = "wind_direction_10m"
    WIND_GUSTS_10M = "wind_gusts_10m"


class DailyVariable(str, Enum):
    """Variables the forecast API can return as daily series."""

    TEMPERATURE_2M_MIN = "temperature_2m_min"
    TEMPERATURE_2M_MAX = "temperature_2m_max"
    UV_INDEX_MAX = "uv_index_max"


def _as_number(value: Any) -> Optional[float]:
    # bool is an int subclass; is_day=True is not a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


class Location(BaseModel):
    """
    A geocoded place.

    Identity is the Open-Meteo ``id``: two records with the same id are the
    same place even if the name or coordinates were rounded differently.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    country: str = ""
    latitude: float
    longitude: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def label(self) -> str:
        """Display name, e.g. ``Salinas, United States``."""
        if self.country:
            return f"{self.name}, {self.country}"
        return self.name


class ForecastSnapshot(BaseModel):
    """
    One forecast response.

    ``current`` maps a variable name to its value, ``daily`` maps a variable
    name to an ordered series whose first element is today. Units live in the
    matching ``*_units`` mappings.
    """

    model_config = ConfigDict(frozen=True)

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    current: Dict[str, Any] = Field(default_factory=dict)
    current_units: Dict[str, Any] = Field(default_factory=dict)
    daily: Dict[str, Any] = Field(default_factory=dict)
    daily_units: Dict[str, Any] = Field(default_factory=dict)

    def current_value(self, variable: str) -> Optional[float]:
        """Numeric current value, or None when absent or not a number."""
        return _as_number(self.current.get(_key(variable)))

    def current_unit(self, variable: str) -> str:
        unit = self.current_units.get(_key(variable))
        return unit if isinstance(unit, str) else ""

    def daily_first(self, variable: str) -> Optional[float]:
        """Today's value of a daily series, or None when unavailable."""
        series = self.daily.get(_key(variable))
        if not isinstance(series, list) or not series:
            return None
        return _as_number(series[0])

    def daily_unit(self, variable: str) -> str:
        unit = self.daily_units.get(_key(variable))
        return unit if isinstance(unit, str) else ""


def _key(variable: str) -> str:
    return variable.value if isinstance(variable, Enum) else variable


__all__ = ["CurrentVariable", "DailyVariable", "Location", "ForecastSnapshot"]
