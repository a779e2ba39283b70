"""
TUI Logging Configuration.

Sets up the --debug log file that records every event the controller sees,
plus anything the rest of the package logs.
"""

from __future__ import annotations
import logging
from pathlib import Path

EVENT_LOGGER = "clima.tui.events"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DebugLogFormatter(logging.Formatter):
    """
    One line per record.

    Controller events:  ``2025-03-01 10:15:02 [msg] ActionRequested: ActionRequested(action='new_search')``
    Everything else:    ``2025-03-01 10:15:02 [warning] clima.tui.screens.weather: ...``
    """

    def __init__(self):
        super().__init__(datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        if record.name == EVENT_LOGGER:
            line = f"{timestamp} [msg] {record.getMessage()}"
        else:
            line = f"{timestamp} [{record.levelname.lower()}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_debug_logging(log_file: Path | str = "dev/debug.log") -> logging.Logger:
    """
    Set up the debug log for a TUI session.

    Parameters
    ----------
    log_file : Path or str
        Log file path (default: "dev/debug.log"); prior contents are discarded

    Returns
    -------
    logging.Logger
        The event logger to hand to the router as its diagnostic sink

    Raises
    ------
    OSError
        If the directory or the file cannot be created
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(DebugLogFormatter())

    # Package logger; the event logger and module loggers propagate into it
    package_logger = logging.getLogger("clima")
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(file_handler)

    package_logger.info("clima session started (log: %s)", log_file)

    return logging.getLogger(EVENT_LOGGER)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a TUI module.

    Parameters
    ----------
    name : str
        Module name (e.g., 'clima.tui.screens.weather')

    Returns
    -------
    logging.Logger
        Configured logger instance
    """
    return logging.getLogger(name)
