"""
TUI Navigation Router.

The root controller. Owns the one active screen, turns navigation signals
into route switches, and forwards every other event to the active screen.

Each route entry builds a brand new screen, so leaving a screen discards all
of its state. Commands are stamped with the route generation they were
issued under; results that come back after a route switch are dropped
instead of reaching a screen that never asked for them.

Transition table
----------------
    RECENT   RecentPicked        -> WEATHER  (forecast + save to recent)
    RECENT   RecentEmpty         -> SEARCH   (input view)
    RECENT   NewSearchRequested  -> SEARCH   (input view)
    SEARCH   LocationChosen      -> WEATHER  (forecast + save to recent)
    SEARCH   RecentRequested     -> RECENT   (reload recent list)
    WEATHER  NewSearchRequested  -> SEARCH   (input view)
    WEATHER  RecentRequested     -> RECENT   (reload recent list)

QuitRequested ends the session from any route.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from rich.text import Text

from clima.openmeteo.client import OpenMeteoClient
from clima.openmeteo.models import Location
from clima.store.recent import RecentLocationStore
from clima.tui.commands import Command
from clima.tui.logging_config import get_logger
from clima.tui.messages import (
    NAVIGATION_SIGNALS,
    Envelope,
    LocationChosen,
    NewSearchRequested,
    QuitRequested,
    RecentEmpty,
    RecentPicked,
    RecentRequested,
)
from clima.tui.screens import RecentScreen, ScreenModel, SearchScreen, WeatherScreen
from clima.tui.screens.search import DEFAULT_SEARCH_COUNT

logger = get_logger(__name__)


class Route(Enum):
    RECENT = "recent"
    SEARCH = "search"
    WEATHER = "weather"


class Router:
    """
    Root controller for the TUI.

    Example
    -------
    >>> router = Router(client, store)
    >>> commands = router.init()              # recent screen, load command
    >>> commands = router.update(ActionRequested("new_search"))
    >>> router.view()                         # rich Text for the active screen
    """

    def __init__(
        self,
        client: OpenMeteoClient,
        store: RecentLocationStore,
        search_count: int = DEFAULT_SEARCH_COUNT,
        sink: Optional[logging.Logger] = None,
    ):
        """
        Initialize router.

        Parameters
        ----------
        client : OpenMeteoClient
            Geocoding and forecast gateway handed to the screens
        store : RecentLocationStore
            Recent list persistence
        search_count : int
            Geocoding result cap for the search screen
        sink : logging.Logger, optional
            Diagnostic sink; when set, every inbound event is logged before dispatch
        """
        self.client = client
        self.store = store
        self.search_count = search_count
        self.sink = sink

        self.route = Route.RECENT
        self.screen: ScreenModel = self._recent_screen()
        self.generation = 0
        self.done = False

        self._transitions: Dict[Tuple[Route, Type], Callable[[Any], List[Command]]] = {
            (Route.RECENT, RecentPicked): lambda signal: self.go_to_weather(signal.location),
            (Route.RECENT, RecentEmpty): lambda signal: self.go_to_search(),
            (Route.RECENT, NewSearchRequested): lambda signal: self.go_to_search(),
            (Route.SEARCH, LocationChosen): lambda signal: self.go_to_weather(signal.location),
            (Route.SEARCH, RecentRequested): lambda signal: self.go_to_recent(),
            (Route.WEATHER, NewSearchRequested): lambda signal: self.go_to_search(),
            (Route.WEATHER, RecentRequested): lambda signal: self.go_to_recent(),
        }

    # ═══════════════════════════════════════════════════════════════════
    # Event Loop Entry Points
    # ═══════════════════════════════════════════════════════════════════

    def init(self) -> List[Command]:
        """Activate the recent screen and issue its load command."""
        return self.go_to_recent()

    def update(self, event: Any) -> List[Command]:
        """
        Process one event to completion.

        Parameters
        ----------
        event : Any
            An input message from the active Textual screen, or an Envelope
            carrying a command result

        Returns
        -------
        list[Command]
            Commands to schedule, already stamped with the current generation
        """
        message = event
        if isinstance(event, Envelope):
            message = event.message
        self._log_event(message)

        if isinstance(event, Envelope) and event.generation != self.generation:
            logger.debug(
                "Dropped %s from generation %d (current %d)",
                type(message).__name__, event.generation, self.generation,
            )
            return []

        if isinstance(message, QuitRequested):
            self.done = True
            return []

        if isinstance(message, NAVIGATION_SIGNALS):
            transition = self._transitions.get((self.route, type(message)))
            if transition is None:
                logger.warning("Ignoring %s on route %s", type(message).__name__, self.route.value)
                return []
            return transition(message)

        return self._stamp(self.screen.update(message))

    def view(self) -> Text:
        return self.screen.view()

    # ═══════════════════════════════════════════════════════════════════
    # Navigation
    # ═══════════════════════════════════════════════════════════════════

    def go_to_recent(self) -> List[Command]:
        return self._enter(Route.RECENT, self._recent_screen())

    def go_to_search(self) -> List[Command]:
        return self._enter(Route.SEARCH, SearchScreen(self.client, search_count=self.search_count))

    def go_to_weather(self, location: Location) -> List[Command]:
        return self._enter(Route.WEATHER, WeatherScreen(location, self.client, self.store))

    def _recent_screen(self) -> RecentScreen:
        return RecentScreen(self.store)

    def _enter(self, route: Route, screen: ScreenModel) -> List[Command]:
        self.generation += 1
        self.route = route
        self.screen = screen
        logger.info("Route -> %s (generation %d)", route.value, self.generation)
        return self._stamp(screen.init())

    def _stamp(self, commands: List[Command]) -> List[Command]:
        return [command.tagged(self.generation) for command in commands]

    def _log_event(self, message: Any) -> None:
        if self.sink is None:
            return
        self.sink.debug("%s: %r", type(message).__name__, message)
