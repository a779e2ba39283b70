"""Local persistence for recently viewed locations."""

from clima.store.recent import (
    MAX_RECENT_LOCATIONS,
    RECENT_LOCATIONS_FILE,
    RecentLocationStore,
    default_config_dir,
)

__all__ = [
    "MAX_RECENT_LOCATIONS",
    "RECENT_LOCATIONS_FILE",
    "RecentLocationStore",
    "default_config_dir",
]
