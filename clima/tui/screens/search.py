"""
Location Search Screen.

Type a place name, submit, and pick among the geocoding candidates.

Sub-views:
- INPUT: free text input
- LOADING: geocoding request in flight, spinner running
- PICK: more than one candidate, choose from the option list
- ERROR: the request failed; only quitting (or leaving the screen) recovers
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from rich.text import Text
from textual.binding import Binding

from clima.openmeteo.client import OpenMeteoClient
from clima.openmeteo.errors import ClimaError
from clima.openmeteo.models import Location
from clima.tui.commands import Command
from clima.tui.logging_config import get_logger
from clima.tui.messages import (
    ListHighlighted,
    ListSelected,
    LocationChosen,
    QueryChanged,
    RecentRequested,
)
from clima.tui.screens.base import (
    CURSOR_DOWN_BINDING,
    CURSOR_UP_BINDING,
    QUIT_BINDING,
    ScreenModel,
    Selection,
    merge_bindings,
)
from clima.tui.styles import ERROR, SUBTLE
from clima.tui.widgets import Spinner, SpinnerTick

logger = get_logger(__name__)

DEFAULT_SEARCH_COUNT = 10


@dataclass(frozen=True)
class LocationsFound:
    query: str
    locations: Tuple[Location, ...]


@dataclass(frozen=True)
class SearchFailed:
    query: str
    error: str


class SearchView(Enum):
    INPUT = "input"
    LOADING = "loading"
    PICK = "pick"
    ERROR = "error"


# "q" is text while typing, so only ctrl+c quits from the input view
INPUT_QUIT_BINDING = Binding("ctrl+c", "quit", "quit", show=False)


class SearchScreen(ScreenModel):
    """Geocoding search with disambiguation."""

    SCREEN_TITLE = "Location search"

    INPUT_BINDINGS = [
        Binding("enter", "submit", "search"),
        Binding("escape", "exit_search", "exit search", key_display="esc"),
        INPUT_QUIT_BINDING,
    ]
    LOADING_BINDINGS = [QUIT_BINDING]
    PICK_BINDINGS = [
        CURSOR_UP_BINDING,
        CURSOR_DOWN_BINDING,
        Binding("enter", "pick", "pick"),
        Binding("n", "new_search", "new search"),
        QUIT_BINDING,
    ]
    BINDINGS = merge_bindings(INPUT_BINDINGS, PICK_BINDINGS, LOADING_BINDINGS)

    def __init__(self, client: OpenMeteoClient, search_count: int = DEFAULT_SEARCH_COUNT):
        self.client = client
        self.search_count = search_count
        self.view_state = SearchView.INPUT
        self.error = ""
        self.query = ""
        self.text = ""
        self.spinner = Spinner()
        self.selection: Selection[Location] = Selection()

    def active_bindings(self) -> List[Binding]:
        if self.view_state is SearchView.INPUT:
            return self.INPUT_BINDINGS
        if self.view_state is SearchView.PICK:
            return self.PICK_BINDINGS
        if self.view_state is SearchView.ERROR:
            return [QUIT_BINDING]
        return self.LOADING_BINDINGS

    def _search(self, query: str) -> Any:
        try:
            locations = self.client.search_locations(query, limit=self.search_count)
        except ClimaError as exc:
            logger.error("Location search for %r failed: %s", query, exc)
            return SearchFailed(query, str(exc))
        return LocationsFound(query, tuple(locations))

    def handle_message(self, message: Any) -> List[Command]:
        if isinstance(message, LocationsFound):
            if len(message.locations) == 1:
                return [Command.emit(LocationChosen(message.locations[0]))]
            self.selection.set_items(message.locations)
            self.view_state = SearchView.PICK
        elif isinstance(message, SearchFailed):
            self.view_state = SearchView.ERROR
            self.error = message.error
        elif isinstance(message, SpinnerTick) and self.view_state is SearchView.LOADING:
            return self.spinner.update(message)
        elif isinstance(message, QueryChanged) and self.view_state is SearchView.INPUT:
            self.text = message.value
        elif self.view_state is SearchView.PICK:
            if isinstance(message, ListHighlighted):
                self.selection.highlight(message.index)
            elif isinstance(message, ListSelected):
                self.selection.highlight(message.index)
                return self.action_pick()
        return []

    def option_labels(self) -> List[str]:
        """Rows for the option list; empty unless candidates are being picked."""
        if self.view_state is not SearchView.PICK:
            return []
        return [loc.label for loc in self.selection.items]

    # ═══════════════════════════════════════════════════════════════════
    # Actions
    # ═══════════════════════════════════════════════════════════════════

    def action_submit(self) -> List[Command]:
        query = self.text.strip()
        if not query:
            return []
        self.query = query
        self.view_state = SearchView.LOADING
        return [
            Command.task("search_locations", lambda: self._search(query)),
            self.spinner.tick(),
        ]

    def action_exit_search(self) -> List[Command]:
        return [Command.emit(RecentRequested())]

    def action_cursor_up(self) -> None:
        self.selection.move(-1)

    def action_cursor_down(self) -> None:
        self.selection.move(1)

    def action_pick(self) -> List[Command]:
        picked = self.selection.selected
        if picked is None:
            return []
        return [Command.emit(LocationChosen(picked))]

    def action_new_search(self) -> None:
        self.text = ""
        self.view_state = SearchView.INPUT

    def render_body(self) -> Text:
        if self.view_state is SearchView.INPUT:
            return Text("Location search:")
        if self.view_state is SearchView.LOADING:
            text = Text("Finding location")
            text.append_text(self.spinner.render())
            return text
        if self.view_state is SearchView.PICK:
            if not self.selection.items:
                text = Text(f'No locations found for "{self.query}"\n')
                text.append("Press n to try another name", style=SUBTLE)
                return text
            return Text("Pick a location:")
        text = Text("Search failed\n", style=ERROR)
        text.append(self.error)
        return text
