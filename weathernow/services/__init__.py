"""Services for fetching weather and keeping favorites."""

from .favorites_store import FavoritesStore, JsonFavoritesRepository
from .weather_client import WeatherClient

__all__ = ["FavoritesStore", "JsonFavoritesRepository", "WeatherClient"]
