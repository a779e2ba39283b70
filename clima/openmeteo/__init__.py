"""Open-Meteo geocoding and forecast access."""

from clima.openmeteo.client import (
    FORECAST_API_URL,
    GEOCODING_API_URL,
    OpenMeteoClient,
)
from clima.openmeteo.errors import (
    ClimaError,
    DecodeError,
    NetworkError,
    StorageError,
    UnexpectedStatus,
)
from clima.openmeteo.models import (
    CurrentVariable,
    DailyVariable,
    ForecastSnapshot,
    Location,
)
from clima.openmeteo.weather_codes import describe_weather_code

__all__ = [
    "FORECAST_API_URL",
    "GEOCODING_API_URL",
    "OpenMeteoClient",
    "ClimaError",
    "DecodeError",
    "NetworkError",
    "StorageError",
    "UnexpectedStatus",
    "CurrentVariable",
    "DailyVariable",
    "ForecastSnapshot",
    "Location",
    "describe_weather_code",
]
