"""
Tick-driven spinner.

Frames come from rich's spinner catalogue. The spinner never schedules
itself: its owner forwards ``SpinnerTick`` messages only while it wants the
animation to run, and each accepted tick returns the command for the next one.
"""

from __future__ import annotations
import itertools
from dataclasses import dataclass
from typing import List

from rich.spinner import SPINNERS
from rich.style import Style
from rich.text import Text

from clima.tui.commands import Command
from clima.tui.styles import ACCENT

_spinner_ids = itertools.count(1)


@dataclass(frozen=True)
class SpinnerTick:
    spinner_id: int
    tag: int


class Spinner:
    """Animated ellipsis (or any rich spinner) advanced one frame per tick."""

    def __init__(self, name: str = "simpleDots", style: Style = ACCENT):
        definition = SPINNERS[name]
        self.frames: List[str] = list(definition["frames"])
        self.interval = definition["interval"] / 1000.0
        self.style = style
        self.id = next(_spinner_ids)
        self.frame = 0
        # Only a tick carrying the current tag advances the spinner
        self._tag = 0

    def tick(self) -> Command:
        """Command producing the next tick after one frame interval."""
        spinner_id, tag = self.id, self._tag
        return Command.after(self.interval, "spinner_tick", lambda: SpinnerTick(spinner_id, tag))

    def update(self, message: SpinnerTick) -> List[Command]:
        if message.spinner_id != self.id or message.tag != self._tag:
            return []
        self.frame = (self.frame + 1) % len(self.frames)
        self._tag += 1
        return [self.tick()]

    def render(self) -> Text:
        return Text(self.frames[self.frame], style=self.style)
