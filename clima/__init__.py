"""
clima - weather lookup in the terminal.

Search a place by name, read its current conditions and today's forecast,
and jump back to the places you looked at recently.
"""

import logging

__version__ = "0.3.0"

# The TUI owns the terminal; records only go somewhere once --debug attaches a handler.
logging.getLogger(__name__).addHandler(logging.NullHandler())
