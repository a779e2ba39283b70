"""Terminal widgets whose state lives in plain Python objects."""

from clima.tui.widgets.spinner import Spinner, SpinnerTick

__all__ = ["Spinner", "SpinnerTick"]
