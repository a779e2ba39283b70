"""
Main TUI Application.

ClimaApp is the Textual application that drives the router: each route is
shown as a Textual screen (see ``clima.tui.views``) whose widget events and
bindings become router events, commands become Textual workers and timers,
and the active screen is re-synced from its model after every event.
"""

from __future__ import annotations
from functools import partial
from typing import TYPE_CHECKING, Any, Iterable

from textual.app import App
from textual.binding import Binding

from clima.tui.commands import Command
from clima.tui.logging_config import get_logger
from clima.tui.messages import Envelope
from clima.tui.views import RouteScreen, view_for

if TYPE_CHECKING:
    from clima.tui.router import Router

logger = get_logger(__name__)


class ClimaApp(App):
    """
    clima - weather in the terminal.

    Flow:
    1. Recent locations (skipped when there are fewer than two)
    2. Location search with disambiguation
    3. Forecast for the chosen location

    Features:
    - Tokyo Night theme
    - Recent locations persisted between sessions
    - Single-threaded event handling; blocking work runs in thread workers
    """

    TITLE = "clima"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, router: Router):
        """
        Initialize the TUI application.

        Parameters
        ----------
        router : Router
            Root controller holding the screen state machines
        """
        super().__init__()
        self.router = router
        self._shown_generation = -1

    def on_mount(self) -> None:
        """Set theme, activate the first route and show its screen."""
        self.theme = "tokyo-night"
        commands = self.router.init()
        self._show_route()
        self._schedule(commands)

    def route_event(self, event: Any) -> None:
        """Feed one event through the router and run whatever it asks for."""
        if self.router.done:
            return
        commands = self.router.update(event)
        if self.router.done:
            logger.info("Quit requested on route %s", self.router.route.value)
            self.exit()
            return
        self._schedule(commands)
        if self.router.generation != self._shown_generation:
            self._show_route()
        else:
            self._sync_screen()

    # ═══════════════════════════════════════════════════════════════════
    # Command Execution
    # ═══════════════════════════════════════════════════════════════════

    def _schedule(self, commands: Iterable[Command]) -> None:
        for command in commands:
            if command.blocking:
                self.run_worker(
                    partial(self._run_blocking, command),
                    name=command.name,
                    group="commands",
                    thread=True,
                )
            elif command.delay:
                self.set_timer(command.delay, partial(self._run_inline, command))
            else:
                self.call_later(self._run_inline, command)

    def _run_blocking(self, command: Command) -> None:
        """Runs in a worker thread; the result is handed back to the UI thread."""
        message = command.run()
        if message is not None:
            self.call_from_thread(self._deliver, command.generation, message)

    def _run_inline(self, command: Command) -> None:
        message = command.run()
        if message is not None:
            self._deliver(command.generation, message)

    def _deliver(self, generation: int, message: Any) -> None:
        self.route_event(Envelope(generation, message))

    # ═══════════════════════════════════════════════════════════════════
    # Screens
    # ═══════════════════════════════════════════════════════════════════

    def _show_route(self) -> None:
        """Replace the visible screen with one for the router's new model."""
        self._shown_generation = self.router.generation
        self.sub_title = self.router.screen.SCREEN_TITLE
        screen = view_for(self.router.screen)
        if isinstance(self.screen, RouteScreen):
            self.switch_screen(screen)
        else:
            self.push_screen(screen)

    def _sync_screen(self) -> None:
        screen = self.screen
        if isinstance(screen, RouteScreen) and screen.model is self.router.screen:
            screen.sync()
