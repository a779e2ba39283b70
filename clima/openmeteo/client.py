"""Open-Meteo geocoding and forecast client."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from clima import __version__
from clima.openmeteo.errors import DecodeError, NetworkError, UnexpectedStatus
from clima.openmeteo.models import ForecastSnapshot, Location

logger = logging.getLogger(__name__)

GEOCODING_API_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_API_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_USER_AGENT = f"clima/{__version__}"

_LOCATIONS = TypeAdapter(List[Location])


class OpenMeteoClient:
    """
    Thin request/response wrapper around the two Open-Meteo endpoints.

    Every call is a single GET; nothing is retried. ``timeout=None`` means a
    stalled connection waits forever.
    """

    def __init__(
        self,
        geocoding_url: str = GEOCODING_API_URL,
        forecast_url: str = FORECAST_API_URL,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        http: Optional[httpx.Client] = None,
    ):
        self.geocoding_url = geocoding_url
        self.forecast_url = forecast_url
        self._http = http or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )

    def search_locations(self, name: str, limit: int = 10) -> List[Location]:
        """Candidate places for ``name``, best match first. Empty when nothing matches."""
        params = {"name": name, "count": limit, "format": "json"}
        data = self._get_json(self.geocoding_url, params)

        results = data.get("results") or []
        try:
            locations = _LOCATIONS.validate_python(results)
        except ValidationError as exc:
            raise DecodeError(f"malformed geocoding results: {exc.error_count()} error(s)") from exc

        logger.debug("Geocoding %r returned %d location(s)", name, len(locations))
        return locations

    def get_forecast(
        self,
        latitude: float,
        longitude: float,
        current: Iterable[str] = (),
        daily: Iterable[str] = (),
    ) -> ForecastSnapshot:
        """Current conditions and daily series for one coordinate pair."""
        params: Dict[str, Any] = {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": "auto",
        }
        current_csv = _csv(current)
        if current_csv:
            params["current"] = current_csv
        daily_csv = _csv(daily)
        if daily_csv:
            params["daily"] = daily_csv

        data = self._get_json(self.forecast_url, params)
        try:
            return ForecastSnapshot.model_validate(data)
        except ValidationError as exc:
            raise DecodeError(f"malformed forecast: {exc.error_count()} error(s)") from exc

    def close(self) -> None:
        self._http.close()

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._http.get(url, params=params)
        except httpx.RequestError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            logger.warning("%s returned %d", url, response.status_code)
            raise UnexpectedStatus(response.status_code, url)

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeError("response is not valid JSON") from exc
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
        return data


def _csv(variables: Iterable[str]) -> str:
    names = [v.value if hasattr(v, "value") else str(v) for v in variables]
    return ",".join(names)


__all__ = ["OpenMeteoClient", "GEOCODING_API_URL", "FORECAST_API_URL"]
