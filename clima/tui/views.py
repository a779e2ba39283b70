"""
Textual Screens for the Routes.

The models in ``clima.tui.screens`` hold all state and decide every
transition. Each screen here is the Textual face of one model:

- compose the standard layout (Header, title, body text, route widgets, Footer)
- turn widget events and key bindings into router messages
- copy the model's state back into the widgets after every event

Bindings are generated from the model's BINDINGS. Each one calls
``dispatch('<action>', '<keys>')``; ``check_action`` disables the bindings the
model's current sub-view does not offer, which also hides them in the Footer.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple, Type

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, OptionList, Static

from clima.tui.messages import ActionRequested, ListHighlighted, ListSelected, QueryChanged
from clima.tui.screens import RecentScreen, ScreenModel, SearchScreen, SearchView, WeatherScreen

if TYPE_CHECKING:
    from clima.tui.app import ClimaApp


def route_bindings(bindings: Sequence[Binding]) -> List[Binding]:
    """Textual bindings that forward to a screen model's actions."""
    return [
        Binding(
            b.key,
            f"dispatch({b.action!r}, {b.key!r})",
            b.description,
            show=b.show,
            key_display=b.key_display,
            # Input binds ctrl+c to copy
            priority=b.key == "ctrl+c",
        )
        for b in bindings
    ]


class RouteScreen(Screen):
    """
    Base class for the route screens.

    Override in Subclasses
    ----------------------
    - BINDINGS
        ``route_bindings(<Model>.BINDINGS)``
    - compose_content(): ComposeResult
        Widgets below the body text (default: none)
    - sync_widgets()
        Copy model state into those widgets
    """

    CSS = """
    #screen-body {
        width: 100%;
        height: 1fr;
        padding: 0 2;
    }

    #main-container {
        width: 100%;
        height: auto;
    }

    #header-container {
        height: auto;
        margin-bottom: 1;
    }

    #title {
        text-style: bold;
        color: $accent;
    }

    #body {
        width: 100%;
        height: auto;
    }

    #query {
        width: 40;
        margin-top: 1;
    }

    #choices {
        height: auto;
        max-height: 12;
        margin-top: 1;
    }
    """

    app: ClimaApp

    def __init__(self, model: ScreenModel):
        super().__init__()
        self.model = model
        self._shown_labels: Tuple[str, ...] = ()

    def compose(self) -> ComposeResult:
        yield Header()

        with Container(id="screen-body"):
            with Container(id="main-container"):
                with Vertical(id="header-container"):
                    yield Static(self.model.SCREEN_TITLE, id="title")

                yield Static(id="body")
                yield from self.compose_content()

        yield Footer()

    def compose_content(self) -> ComposeResult:
        return iter(())

    def on_mount(self) -> None:
        self.sync()

    # ═══════════════════════════════════════════════════════════════════
    # Model -> Widgets
    # ═══════════════════════════════════════════════════════════════════

    def sync(self) -> None:
        """Re-render the body and widgets from the model."""
        if not self.is_mounted:
            return
        self.query_one("#body", Static).update(self.model.view())
        self.sync_widgets()
        self.refresh_bindings()

    def sync_widgets(self) -> None:
        pass

    def sync_options(self, choices: OptionList, labels: List[str], index: int) -> None:
        """Show ``labels`` in ``choices`` with row ``index`` highlighted."""
        choices.display = bool(labels)
        if tuple(labels) != self._shown_labels:
            self._shown_labels = tuple(labels)
            choices.clear_options()
            choices.add_options(labels)
        if labels and choices.highlighted != index:
            choices.highlighted = index

    # ═══════════════════════════════════════════════════════════════════
    # Widgets -> Model
    # ═══════════════════════════════════════════════════════════════════

    def check_action(self, action: str, parameters: Tuple[object, ...]) -> Optional[bool]:
        if action == "dispatch":
            name, keys = parameters
            return self.model.is_active(str(keys), str(name))
        return True

    def action_dispatch(self, action: str, keys: str) -> None:
        self.route(ActionRequested(action))

    def route(self, message: Any) -> None:
        # Widget events can arrive after the router has already moved on
        if self.app.router.screen is not self.model:
            return
        self.app.route_event(message)

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        self.route(ListHighlighted(event.option_index))

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.route(ListSelected(event.option_index))


class RecentRouteScreen(RouteScreen):
    """Recent locations as an option list."""

    BINDINGS = route_bindings(RecentScreen.BINDINGS)

    model: RecentScreen

    def compose_content(self) -> ComposeResult:
        yield OptionList(id="choices")

    def sync_widgets(self) -> None:
        choices = self.query_one("#choices", OptionList)
        labels = self.model.option_labels()
        self.sync_options(choices, labels, self.model.selection.index)
        if labels:
            choices.focus()


class SearchRouteScreen(RouteScreen):
    """Search input, then candidates as an option list."""

    BINDINGS = route_bindings(SearchScreen.BINDINGS)

    model: SearchScreen

    def compose_content(self) -> ComposeResult:
        yield Input(placeholder="Salinas", max_length=256, id="query")
        yield OptionList(id="choices")

    def sync_widgets(self) -> None:
        query = self.query_one("#query", Input)
        choices = self.query_one("#choices", OptionList)
        labels = self.model.option_labels()

        query.display = self.model.view_state is SearchView.INPUT
        if query.value != self.model.text:
            query.value = self.model.text
        self.sync_options(choices, labels, self.model.selection.index)

        if query.display:
            query.focus()
        elif labels:
            choices.focus()
        else:
            self.set_focus(None)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.route(QueryChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.route(QueryChanged(event.value))
        self.route(ActionRequested("submit"))


class WeatherRouteScreen(RouteScreen):
    """Forecast text only."""

    BINDINGS = route_bindings(WeatherScreen.BINDINGS)

    model: WeatherScreen


ROUTE_SCREENS: Dict[Type[ScreenModel], Type[RouteScreen]] = {
    RecentScreen: RecentRouteScreen,
    SearchScreen: SearchRouteScreen,
    WeatherScreen: WeatherRouteScreen,
}


def view_for(model: ScreenModel) -> RouteScreen:
    """Build the Textual screen that renders ``model``."""
    return ROUTE_SCREENS[type(model)](model)
