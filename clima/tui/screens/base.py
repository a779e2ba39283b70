"""
Base Screen Model.

Each top-level screen (recent, search, weather) is a small state machine:

- ``init()`` returns the commands to run when the screen becomes active
- ``update(message)`` applies one event and returns follow-up commands
- ``view()`` renders the body of the current sub-view as rich text

Key handling follows Textual's binding/action convention: BINDINGS map keys
to action names, and an ActionRequested calls ``action_<name>`` on the
screen, but only while a binding for that action is active. Screens whose
available keys depend on the sub-view override ``active_bindings()``.

The Textual screens in ``clima.tui.views`` own the widgets (Input,
OptionList, Footer) and mirror their state into and out of these models.
"""

from __future__ import annotations
from typing import Any, Generic, List, Optional, Sequence, Set, Tuple, TypeVar

from rich.text import Text
from textual.binding import Binding

from clima.tui.commands import Command, quit_command
from clima.tui.messages import ActionRequested

T = TypeVar("T")

QUIT_BINDING = Binding("q,ctrl+c", "quit", "quit", key_display="q")
CURSOR_UP_BINDING = Binding("up,k", "cursor_up", "up", key_display="↑")
CURSOR_DOWN_BINDING = Binding("down,j", "cursor_down", "down", key_display="↓")


def merge_bindings(*groups: Sequence[Binding]) -> List[Binding]:
    """Concatenate binding lists, dropping repeats of the same key and action."""
    merged: List[Binding] = []
    seen: Set[Tuple[str, str]] = set()
    for group in groups:
        for binding in group:
            if (binding.key, binding.action) not in seen:
                seen.add((binding.key, binding.action))
                merged.append(binding)
    return merged


class Selection(Generic[T]):
    """Items shown in an option list plus the highlighted index."""

    def __init__(self):
        self.items: Tuple[T, ...] = ()
        self.index = 0

    def set_items(self, items: Sequence[T]) -> None:
        self.items = tuple(items)
        self.index = 0

    def highlight(self, index: int) -> None:
        if not self.items:
            return
        self.index = max(0, min(len(self.items) - 1, index))

    def move(self, delta: int) -> None:
        self.highlight(self.index + delta)

    @property
    def selected(self) -> Optional[T]:
        if not self.items:
            return None
        return self.items[self.index]


class ScreenModel:
    """
    Base class for screen state machines.

    Override in Subclasses
    ----------------------
    - SCREEN_TITLE: str
        Heading shown in the app header
    - BINDINGS: list[Binding]
        Every binding the screen ever offers, across all sub-views
    - active_bindings()
        The subset live in the current sub-view (default: all of them)
    - init(), handle_message(), render_body()
    - action_<name>() for every action named in the bindings
    """

    SCREEN_TITLE: str = ""
    BINDINGS: List[Binding] = [QUIT_BINDING]

    def init(self) -> List[Command]:
        return []

    def update(self, message: Any) -> List[Command]:
        if isinstance(message, ActionRequested):
            return self.run_action(message.action)
        return self.handle_message(message)

    def handle_message(self, message: Any) -> List[Command]:
        """Non-action messages. Unknown messages are ignored."""
        return []

    # ═══════════════════════════════════════════════════════════════════
    # Bindings and Actions
    # ═══════════════════════════════════════════════════════════════════

    def active_bindings(self) -> List[Binding]:
        return self.BINDINGS

    def active_actions(self) -> Set[str]:
        return {binding.action for binding in self.active_bindings()}

    def is_active(self, key: str, action: str) -> bool:
        """Whether the binding for ``key`` and ``action`` is live right now."""
        return any(b.key == key and b.action == action for b in self.active_bindings())

    def action_for(self, key: str) -> Optional[str]:
        """Action a key triggers in the current sub-view, if any."""
        for binding in self.active_bindings():
            if key in (k.strip() for k in binding.key.split(",")):
                return binding.action
        return None

    def run_action(self, action: str) -> List[Command]:
        if action not in self.active_actions():
            return []
        return getattr(self, f"action_{action}")() or []

    def action_quit(self) -> List[Command]:
        return [quit_command()]

    # ═══════════════════════════════════════════════════════════════════
    # Rendering
    # ═══════════════════════════════════════════════════════════════════

    def render_body(self) -> Text:
        raise NotImplementedError

    def view(self) -> Text:
        return self.render_body()
