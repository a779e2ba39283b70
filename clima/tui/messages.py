"""
Events flowing through the TUI event loop.

Everything the router receives is one of:

- user input, already translated by the Textual widgets: ActionRequested (a
  key binding fired), QueryChanged (search text edited), ListHighlighted and
  ListSelected (option list cursor and choice)
- Envelope: the result of a command, tagged with the generation that issued it
- a navigation signal (RecentPicked, RecentEmpty, LocationChosen,
  NewSearchRequested, RecentRequested) or QuitRequested, normally inside an Envelope

Screen-private results (loaded data, fetch failures, spinner ticks) are
defined next to the screen or widget that consumes them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from clima.openmeteo.models import Location


@dataclass(frozen=True)
class ActionRequested:
    """A key binding fired; ``action`` names an ``action_<name>`` method on the active screen."""

    action: str


@dataclass(frozen=True)
class QueryChanged:
    """The search input now holds ``value``."""

    value: str


@dataclass(frozen=True)
class ListHighlighted:
    index: int


@dataclass(frozen=True)
class ListSelected:
    index: int


@dataclass(frozen=True)
class Envelope:
    """A command result, stamped with the route generation that issued the command."""

    generation: int
    message: Any


@dataclass(frozen=True)
class QuitRequested:
    pass


# ═══════════════════════════════════════════════════════════════════
# Navigation Signals (handled by the router, never by screens)
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RecentPicked:
    """A recent location was picked (or auto-picked because it was the only one)."""

    location: Location


@dataclass(frozen=True)
class RecentEmpty:
    """The recent list is empty; nothing to pick from."""


@dataclass(frozen=True)
class LocationChosen:
    """Search settled on a location."""

    location: Location


@dataclass(frozen=True)
class NewSearchRequested:
    pass


@dataclass(frozen=True)
class RecentRequested:
    pass


NAVIGATION_SIGNALS = (
    RecentPicked,
    RecentEmpty,
    LocationChosen,
    NewSearchRequested,
    RecentRequested,
)
