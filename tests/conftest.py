"""
Shared fixtures for the clima tests.

HeadlessProgram runs the router the way the Textual driver does (one event
at a time, command results fed back in FIFO order) but synchronously and
without a terminal. Keys go through the active model's bindings, as the
route screens' Textual bindings do, and typing reports the whole input value
the way Input.Changed does. Delayed commands (spinner ticks) are dropped unless a
test asks for them, so every drain terminates.
"""

from collections import deque
from typing import Any, Deque, Dict, List, Optional

import pytest

from clima.openmeteo.errors import ClimaError
from clima.openmeteo.models import ForecastSnapshot, Location
from clima.store.recent import RecentLocationStore
from clima.tui.commands import Command
from clima.tui.messages import ActionRequested, Envelope, QueryChanged
from clima.tui.router import Router
from clima.tui.screens import ScreenModel


SALINAS = Location(id=5391295, name="Salinas", country="United States", latitude=36.67774, longitude=-121.6555)
SALINAS_EC = Location(id=3651356, name="Salinas", country="Ecuador", latitude=-2.21452, longitude=-80.95151)
QUITO = Location(id=3652462, name="Quito", country="Ecuador", latitude=-0.22985, longitude=-78.52495)


def press(screen: ScreenModel, key: str) -> List[Command]:
    """Press ``key`` on a screen model; keys with no active binding do nothing."""
    action = screen.action_for(key)
    if action is None:
        return []
    return screen.update(ActionRequested(action))


def footer_text(screen: ScreenModel) -> str:
    """The visible bindings as the Footer lists them, e.g. ``enter pick • q quit``."""
    return " • ".join(
        f"{b.key_display or b.key.split(',')[0]} {b.description}"
        for b in screen.active_bindings()
        if b.show
    )


def make_snapshot(**overrides) -> ForecastSnapshot:
    """A complete forecast payload; keyword arguments replace top-level keys."""
    payload: Dict[str, Any] = {
        "latitude": 36.68,
        "longitude": -121.66,
        "timezone": "America/Los_Angeles",
        "current_units": {
            "time": "iso8601",
            "temperature_2m": "°C",
            "apparent_temperature": "°C",
            "relative_humidity_2m": "%",
            "weather_code": "wmo code",
            "wind_speed_10m": "km/h",
            "wind_direction_10m": "°",
            "wind_gusts_10m": "km/h",
            "precipitation": "mm",
            "pressure_msl": "hPa",
        },
        "current": {
            "time": "2025-03-01T10:15",
            "temperature_2m": 21.3,
            "apparent_temperature": 20.1,
            "relative_humidity_2m": 55,
            "weather_code": 61,
            "wind_speed_10m": 12.4,
            "wind_direction_10m": 270,
            "wind_gusts_10m": 25.2,
            "precipitation": 0.4,
            "pressure_msl": 1016.2,
        },
        "daily_units": {
            "time": "iso8601",
            "temperature_2m_min": "°C",
            "temperature_2m_max": "°C",
            "uv_index_max": "",
        },
        "daily": {
            "time": ["2025-03-01", "2025-03-02"],
            "temperature_2m_min": [9.8, 10.2],
            "temperature_2m_max": [22.5, 19.0],
            "uv_index_max": [5.35, 4.1],
        },
    }
    payload.update(overrides)
    return ForecastSnapshot.model_validate(payload)


class FakeClient:
    """
    Stand-in for OpenMeteoClient.

    Set ``locations`` / ``snapshot`` to the next results, or the matching
    ``*_error`` to make the call raise. Calls are recorded.
    """

    def __init__(self):
        self.locations: List[Location] = []
        self.snapshot: ForecastSnapshot = make_snapshot()
        self.search_error: Optional[ClimaError] = None
        self.forecast_error: Optional[ClimaError] = None
        self.searches: List[tuple] = []
        self.forecasts: List[dict] = []

    def search_locations(self, name: str, limit: int = 10) -> List[Location]:
        self.searches.append((name, limit))
        if self.search_error is not None:
            raise self.search_error
        return list(self.locations)

    def get_forecast(self, latitude, longitude, current=(), daily=()) -> ForecastSnapshot:
        self.forecasts.append({
            "latitude": latitude,
            "longitude": longitude,
            "current": [v.value for v in current],
            "daily": [v.value for v in daily],
        })
        if self.forecast_error is not None:
            raise self.forecast_error
        return self.snapshot


class HeadlessProgram:
    """Synchronous event loop around a Router."""

    def __init__(self, router: Router, run_delayed: bool = False, max_steps: int = 500):
        self.router = router
        self.run_delayed = run_delayed
        self.max_steps = max_steps
        self.pending: Deque[Command] = deque()
        self.delivered: List[Any] = []

    def start(self) -> "HeadlessProgram":
        self.pending.extend(self.router.init())
        self.run_pending()
        return self

    def send(self, event: Any) -> None:
        self.pending.extend(self.router.update(event))
        self.run_pending()

    def press(self, *keys: str) -> None:
        for key in keys:
            action = self.router.screen.action_for(key)
            if action is not None:
                self.send(ActionRequested(action))

    def type(self, text: str) -> None:
        self.send(QueryChanged(getattr(self.router.screen, "text", "") + text))

    def run_pending(self) -> None:
        steps = 0
        while self.pending and not self.router.done:
            steps += 1
            if steps > self.max_steps:
                raise RuntimeError("command queue did not settle")
            command = self.pending.popleft()
            if command.delay and not self.run_delayed:
                continue
            message = command.run()
            if message is None:
                continue
            self.delivered.append(message)
            self.pending.extend(self.router.update(Envelope(command.generation, message)))

    def view_text(self) -> str:
        return self.router.view().plain


@pytest.fixture
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def store(tmp_path) -> RecentLocationStore:
    return RecentLocationStore(tmp_path / "config" / "clima_recent.json")


@pytest.fixture
def router(client, store) -> Router:
    return Router(client=client, store=store)


@pytest.fixture
def program(router) -> HeadlessProgram:
    return HeadlessProgram(router)
