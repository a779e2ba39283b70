#!/usr/bin/env python3
"""
TUI Application Entry Point.

Launch clima with:
    python tui_app.py [--debug]

Same as the installed ``clima`` command.
"""

from clima.cli.main import main


if __name__ == "__main__":
    main()
