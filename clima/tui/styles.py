"""
Shared rich styles.

Pure presentation constants; screens import them, nothing mutates them.
"""

from rich.style import Style

ACCENT = Style(color="bright_magenta")
SUBTLE = Style(color="bright_black")
ERROR = Style(color="red", bold=True)

# Width of the left-hand label column in the weather view
LABEL_WIDTH = 20
