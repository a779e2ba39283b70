"""
TUI Screens.

- **base**: ScreenModel and Selection, the key/action and rendering conventions
- **recent**: recently viewed locations
- **search**: place name search and disambiguation
- **weather**: forecast for one location
"""

from clima.tui.screens.base import ScreenModel, Selection
from clima.tui.screens.recent import RecentScreen, RecentView
from clima.tui.screens.search import SearchScreen, SearchView
from clima.tui.screens.weather import WeatherScreen, WeatherView

__all__ = [
    "ScreenModel",
    "Selection",
    "RecentScreen",
    "RecentView",
    "SearchScreen",
    "SearchView",
    "WeatherScreen",
    "WeatherView",
]
