"""
Recent Locations Screen.

Shows the places viewed most recently. With nothing or only one place on
file it does not wait for input: it hands off to search or straight to the
forecast.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from rich.text import Text
from textual.binding import Binding

from clima.openmeteo.errors import StorageError
from clima.openmeteo.models import Location
from clima.store.recent import RecentLocationStore
from clima.tui.commands import Command
from clima.tui.logging_config import get_logger
from clima.tui.messages import (
    ListHighlighted,
    ListSelected,
    NewSearchRequested,
    RecentEmpty,
    RecentPicked,
)
from clima.tui.screens.base import (
    CURSOR_DOWN_BINDING,
    CURSOR_UP_BINDING,
    QUIT_BINDING,
    ScreenModel,
    Selection,
)
from clima.tui.styles import ERROR

logger = get_logger(__name__)


@dataclass(frozen=True)
class RecentLoaded:
    locations: Tuple[Location, ...]


@dataclass(frozen=True)
class RecentLoadFailed:
    error: str


class RecentView(Enum):
    LISTING = "listing"
    ERROR = "error"


class RecentScreen(ScreenModel):
    """Pick one of the recently viewed locations."""

    SCREEN_TITLE = "Recent locations"

    BINDINGS = [
        CURSOR_UP_BINDING,
        CURSOR_DOWN_BINDING,
        Binding("enter", "pick", "pick"),
        Binding("n", "new_search", "new search"),
        QUIT_BINDING,
    ]

    def __init__(self, store: RecentLocationStore):
        self.store = store
        self.view_state = RecentView.LISTING
        self.error = ""
        self.selection: Selection[Location] = Selection()

    def init(self) -> List[Command]:
        return [Command.task("load_recent", self._load_recent)]

    def _load_recent(self) -> Any:
        try:
            return RecentLoaded(tuple(self.store.load()))
        except StorageError as exc:
            logger.error("Loading recent locations failed: %s", exc)
            return RecentLoadFailed(str(exc))

    def handle_message(self, message: Any) -> List[Command]:
        if isinstance(message, RecentLoaded):
            if not message.locations:
                return [Command.emit(RecentEmpty())]
            if len(message.locations) == 1:
                return [Command.emit(RecentPicked(message.locations[0]))]
            self.selection.set_items(message.locations)
        elif isinstance(message, RecentLoadFailed):
            self.view_state = RecentView.ERROR
            self.error = message.error
        elif self.view_state is RecentView.LISTING:
            if isinstance(message, ListHighlighted):
                self.selection.highlight(message.index)
            elif isinstance(message, ListSelected):
                self.selection.highlight(message.index)
                return self.action_pick()
        return []

    def active_bindings(self) -> List[Binding]:
        if self.view_state is RecentView.ERROR:
            return [QUIT_BINDING]
        return self.BINDINGS

    def option_labels(self) -> List[str]:
        """Rows for the option list; empty unless the listing is shown."""
        if self.view_state is not RecentView.LISTING:
            return []
        return [loc.label for loc in self.selection.items]

    # ═══════════════════════════════════════════════════════════════════
    # Actions
    # ═══════════════════════════════════════════════════════════════════

    def action_cursor_up(self) -> None:
        self.selection.move(-1)

    def action_cursor_down(self) -> None:
        self.selection.move(1)

    def action_pick(self) -> List[Command]:
        picked = self.selection.selected
        if picked is None:
            return []
        return [Command.emit(RecentPicked(picked))]

    def action_new_search(self) -> List[Command]:
        return [Command.emit(NewSearchRequested())]

    def render_body(self) -> Text:
        if self.view_state is RecentView.ERROR:
            text = Text("Could not load recent locations\n", style=ERROR)
            text.append(self.error)
            return text
        return Text("Recent locations:")
