"""UI components for WeatherNow."""

from .favorites_panel import FavoritesPanel
from .favorites_preview import FavoritesPreview
from .language_switch import LanguageSwitch
from .panes import FavoritesPane, SearchPane
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = [
    "FavoritesPane",
    "FavoritesPanel",
    "FavoritesPreview",
    "LanguageSwitch",
    "SearchPane",
    "StatusBar",
    "WeatherPanel",
]
