"""
Commands: descriptions of work for the event loop to run.

A screen never does I/O inside ``update``. It returns commands, and the
driver runs each one and feeds its single result message back into the same
event stream. Three flavours:

- ``Command.task``: blocking work (HTTP, file I/O), run off the UI thread
- ``Command.emit``: hand back a message that is already known
- ``Command.after``: produce a message after a delay (spinner ticks)
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Callable

from clima.tui.messages import QuitRequested


@dataclass(frozen=True)
class Command:
    """
    A pending unit of work that yields at most one message.

    Attributes
    ----------
    name : str
        Short label used for worker names and logs
    run : Callable[[], Any]
        Does the work; returns the message to deliver, or None
    blocking : bool
        True if ``run`` may block and must not run on the UI thread
    delay : float
        Seconds to wait before running (0 runs as soon as possible)
    generation : int
        Route generation the router stamped on the command
    """

    name: str
    run: Callable[[], Any]
    blocking: bool = False
    delay: float = 0.0
    generation: int = 0

    @classmethod
    def task(cls, name: str, run: Callable[[], Any]) -> "Command":
        return cls(name=name, run=run, blocking=True)

    @classmethod
    def emit(cls, message: Any) -> "Command":
        return cls(name=type(message).__name__, run=lambda: message)

    @classmethod
    def after(cls, delay: float, name: str, run: Callable[[], Any]) -> "Command":
        return cls(name=name, run=run, delay=delay)

    def tagged(self, generation: int) -> "Command":
        return replace(self, generation=generation)


def quit_command() -> Command:
    return Command.emit(QuitRequested())
