"""Data models for WeatherNow."""

from .config import ClientConfig, Config, Settings, StorageConfig
from .favorite import FavoriteCity
from .weather import WeatherRecord

__all__ = [
    "ClientConfig",
    "Config",
    "FavoriteCity",
    "Settings",
    "StorageConfig",
    "WeatherRecord",
]
