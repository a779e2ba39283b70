"""
Weather Screen.

Current conditions and today's range for one location.

On entry it saves the location to the recent list (fire-and-forget), fetches
the forecast and starts the spinner, all at once. The view degrades field by
field: anything missing or non-numeric in the payload renders as "-".
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from rich.text import Text
from textual.binding import Binding

from clima.openmeteo.client import OpenMeteoClient
from clima.openmeteo.errors import ClimaError
from clima.openmeteo.models import CurrentVariable, DailyVariable, ForecastSnapshot, Location
from clima.openmeteo.weather_codes import describe_weather_code
from clima.store.recent import RecentLocationStore
from clima.tui.commands import Command
from clima.tui.logging_config import get_logger
from clima.tui.messages import NewSearchRequested, RecentRequested
from clima.tui.screens.base import QUIT_BINDING, ScreenModel
from clima.tui.styles import ACCENT, ERROR, LABEL_WIDTH, SUBTLE
from clima.tui.widgets import Spinner, SpinnerTick

logger = get_logger(__name__)

PLACEHOLDER = "-"

CURRENT_FIELDS = (
    CurrentVariable.TEMPERATURE_2M,
    CurrentVariable.APPARENT_TEMPERATURE,
    CurrentVariable.RELATIVE_HUMIDITY_2M,
    CurrentVariable.WEATHER_CODE,
    CurrentVariable.WIND_SPEED_10M,
    CurrentVariable.WIND_DIRECTION_10M,
    CurrentVariable.WIND_GUSTS_10M,
    CurrentVariable.PRECIPITATION,
    CurrentVariable.PRESSURE_MSL,
)

DAILY_FIELDS = (
    DailyVariable.TEMPERATURE_2M_MIN,
    DailyVariable.TEMPERATURE_2M_MAX,
    DailyVariable.UV_INDEX_MAX,
)


@dataclass(frozen=True)
class ForecastLoaded:
    snapshot: ForecastSnapshot


@dataclass(frozen=True)
class ForecastFailed:
    error: str


@dataclass(frozen=True)
class RecentSaved:
    """Outcome of the recent-list write; the screen ignores it."""

    error: Optional[str] = None


class WeatherView(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def format_quantity(value: Optional[float], unit: str = "") -> str:
    """``21.3 °C``, or the placeholder when there is no value."""
    if value is None:
        return PLACEHOLDER
    return f"{value:.1f} {unit}".rstrip()


class WeatherScreen(ScreenModel):
    """Forecast display for a single location."""

    SCREEN_TITLE = "Weather"

    BINDINGS = [
        Binding("n", "new_search", "new search"),
        Binding("b", "recent", "recent locations"),
        Binding("r", "refresh", "refresh"),
        QUIT_BINDING,
    ]

    def __init__(self, location: Location, client: OpenMeteoClient, store: RecentLocationStore):
        self.location = location
        self.client = client
        self.store = store
        self.view_state = WeatherView.LOADING
        self.error = ""
        self.snapshot: Optional[ForecastSnapshot] = None
        self.spinner = Spinner()

    def init(self) -> List[Command]:
        return [
            Command.task("save_recent", self._save_recent),
            self._fetch_command(),
            self.spinner.tick(),
        ]

    def _fetch_command(self) -> Command:
        return Command.task("get_forecast", self._get_forecast)

    def _get_forecast(self) -> Any:
        try:
            snapshot = self.client.get_forecast(
                self.location.latitude,
                self.location.longitude,
                current=CURRENT_FIELDS,
                daily=DAILY_FIELDS,
            )
        except ClimaError as exc:
            logger.error("Forecast for %s failed: %s", self.location.label, exc)
            return ForecastFailed(str(exc))
        return ForecastLoaded(snapshot)

    def _save_recent(self) -> RecentSaved:
        # A failed save must never reach the forecast view
        try:
            self.store.add(self.location)
        except ClimaError as exc:
            logger.warning("Could not save %s to recent locations: %s", self.location.label, exc)
            return RecentSaved(str(exc))
        return RecentSaved()

    def handle_message(self, message: Any) -> List[Command]:
        if isinstance(message, ForecastLoaded):
            self.snapshot = message.snapshot
            self.view_state = WeatherView.READY
        elif isinstance(message, ForecastFailed):
            self.error = message.error
            self.view_state = WeatherView.ERROR
        elif isinstance(message, SpinnerTick) and self.view_state is WeatherView.LOADING:
            return self.spinner.update(message)
        return []

    def active_bindings(self) -> List[Binding]:
        if self.view_state is WeatherView.READY:
            return self.BINDINGS
        return [b for b in self.BINDINGS if b.action != "refresh"]

    # ═══════════════════════════════════════════════════════════════════
    # Actions
    # ═══════════════════════════════════════════════════════════════════

    def action_new_search(self) -> List[Command]:
        return [Command.emit(NewSearchRequested())]

    def action_recent(self) -> List[Command]:
        return [Command.emit(RecentRequested())]

    def action_refresh(self) -> List[Command]:
        self.view_state = WeatherView.LOADING
        return [self._fetch_command(), self.spinner.tick()]

    # ═══════════════════════════════════════════════════════════════════
    # Rendering
    # ═══════════════════════════════════════════════════════════════════

    def render_body(self) -> Text:
        if self.view_state is WeatherView.LOADING:
            text = Text("Loading forecast")
            text.append_text(self.spinner.render())
            return text
        if self.view_state is WeatherView.ERROR:
            text = Text("Failed to get weather forecast\n", style=ERROR)
            text.append(self.error)
            return text
        return self.render_forecast(self.snapshot or ForecastSnapshot())

    def render_forecast(self, snapshot: ForecastSnapshot) -> Text:
        current = snapshot.current_value
        unit = snapshot.current_unit

        text = Text(self.location.label)
        text.append("\n")
        text.append(describe_weather_code(snapshot.current.get(CurrentVariable.WEATHER_CODE.value)), style=ACCENT)

        temperature = CurrentVariable.TEMPERATURE_2M
        apparent = CurrentVariable.APPARENT_TEMPERATURE
        text.append("\n" + format_quantity(current(temperature), unit(temperature)))
        text.append(f" (feels like {format_quantity(current(apparent), unit(apparent))})", style=SUBTLE)

        low = DailyVariable.TEMPERATURE_2M_MIN
        high = DailyVariable.TEMPERATURE_2M_MAX
        self._row(text, "Min", format_quantity(snapshot.daily_first(low), snapshot.daily_unit(low)))
        self._row(text, "Max", format_quantity(snapshot.daily_first(high), snapshot.daily_unit(high)))
        text.append("\n")

        speed = CurrentVariable.WIND_SPEED_10M
        direction = CurrentVariable.WIND_DIRECTION_10M
        wind = f"{format_quantity(current(speed), unit(speed))} @ {format_quantity(current(direction), unit(direction))}"
        self._row(text, "Wind", wind)
        for label, variable in (
            ("Wind gusts", CurrentVariable.WIND_GUSTS_10M),
            ("Humidity", CurrentVariable.RELATIVE_HUMIDITY_2M),
            ("Precipitation", CurrentVariable.PRECIPITATION),
            ("Pressure", CurrentVariable.PRESSURE_MSL),
        ):
            self._row(text, label, format_quantity(current(variable), unit(variable)))

        self._row(text, "UV index", format_quantity(snapshot.daily_first(DailyVariable.UV_INDEX_MAX)))
        return text

    @staticmethod
    def _row(text: Text, label: str, value: str) -> None:
        text.append("\n" + label.ljust(LABEL_WIDTH), style=SUBTLE)
        text.append(value)
