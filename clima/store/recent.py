"""
Recent Locations Store.

Keeps the last few places the user looked at, most recent first.
Stored as an indented JSON array in the per-user config directory.
"""

from __future__ import annotations
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from clima.openmeteo.errors import StorageError
from clima.openmeteo.models import Location

logger = logging.getLogger(__name__)

RECENT_LOCATIONS_FILE = "clima_recent.json"
MAX_RECENT_LOCATIONS = 5

_LOCATIONS = TypeAdapter(List[Location])


def default_config_dir() -> Path:
    """``$XDG_CONFIG_HOME/clima``, or ``~/.config/clima`` when unset."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "clima"


class RecentLocationStore:
    """
    Persistent, capacity-bounded list of recently viewed locations.

    Features:
    - De-duplicated by location id (re-adding moves the entry to the front)
    - Never holds more than MAX_RECENT_LOCATIONS entries
    - Atomic rewrite (temp file + rename) on every addition

    Storage location: ~/.config/clima/clima_recent.json
    """

    def __init__(self, path: Optional[Path] = None, capacity: int = MAX_RECENT_LOCATIONS):
        """
        Initialize RecentLocationStore.

        Parameters
        ----------
        path : Path, optional
            JSON file to use. Defaults to clima_recent.json in the config directory
        capacity : int
            Maximum number of entries kept (default: 5)
        """
        if path is None:
            self.path = default_config_dir() / RECENT_LOCATIONS_FILE
        else:
            self.path = Path(path)
        self.capacity = min(capacity, MAX_RECENT_LOCATIONS)
        # add() is read-modify-write and may run on several worker threads
        self._lock = threading.Lock()

    def load(self) -> List[Location]:
        """
        Load the recent list.

        Returns
        -------
        list[Location]
            Most recent first; empty if the file does not exist yet

        Raises
        ------
        StorageError
            If the file cannot be read or does not hold a list of locations
        """
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(f"cannot read {self.path}: {exc.strerror or exc}") from exc

        # Bytes go straight to the JSON parser; bad UTF-8 surfaces as a decode error here
        try:
            return _LOCATIONS.validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as exc:
            raise StorageError(f"{self.path} is not a valid recent list") from exc

    def add(self, location: Location) -> List[Location]:
        """
        Put ``location`` at the front of the list and save.

        Any entry with the same id is removed first, then the list is cut
        down to capacity.

        Returns
        -------
        list[Location]
            The list as written to disk

        Raises
        ------
        StorageError
            If the existing file is unreadable or the new one cannot be written
        """
        with self._lock:
            locations = [loc for loc in self.load() if loc.id != location.id]
            locations.insert(0, location)
            locations = locations[: self.capacity]
            self._save(locations)

        logger.debug("Saved %s to recent list (%d entries)", location.label, len(locations))
        return locations

    def _save(self, locations: List[Location]) -> None:
        """Write the list next to its final path, then rename over it."""
        data = [loc.model_dump(mode="json") for loc in locations]
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"cannot write {self.path}: {exc.strerror or exc}") from exc
