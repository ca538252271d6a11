"""Application state owned by the root view and changed only through actions."""

import logging

from .i18n import Language, Translations, get_translations
from .models.favorite import FavoriteCity
from .models.weather import WeatherRecord
from .services.favorites_store import FavoritesStore
from .services.weather_client import WeatherClient

logger = logging.getLogger(__name__)


class AppState:
    """Language, search input, last weather result and favorites.

    Widgets read these through properties and request changes by calling
    the action methods; nothing else writes to the underlying fields.
    """

    def __init__(self, weather_client: WeatherClient, favorites_store: FavoritesStore):
        self._weather_client = weather_client
        self._favorites_store = favorites_store
        self._lang = Language.KO
        self._city = ""
        self._weather: WeatherRecord | None = None

    @property
    def lang(self) -> Language:
        return self._lang

    @property
    def translations(self) -> Translations:
        return get_translations(self._lang)

    @property
    def city(self) -> str:
        return self._city

    @property
    def weather(self) -> WeatherRecord | None:
        return self._weather

    @property
    def favorites(self) -> tuple[FavoriteCity, ...]:
        return self._favorites_store.favorites

    def set_city(self, city: str) -> None:
        self._city = city

    def change_language(self, lang: Language | str) -> Language:
        """Switch the UI language. The current result is not refetched."""
        self._lang = Language.parse(lang)
        logger.debug(f"Language changed to {self._lang.value}")
        return self._lang

    async def search(self) -> WeatherRecord | None:
        """Look up the weather for the current city input.

        Blank input is ignored and leaves the previous result in place.
        Otherwise the result replaces the current one once it arrives,
        including ``None`` on failure.
        """
        if not self._city.strip():
            return self._weather

        city, lang = self._city, self._lang
        self._weather = await self._weather_client.fetch_weather(city, lang)
        return self._weather

    def add_favorite(self) -> list[FavoriteCity]:
        return self._favorites_store.add(self._weather)

    def update_memo(self, favorite_id: int, memo: str) -> list[FavoriteCity]:
        return self._favorites_store.update_memo(favorite_id, memo)

    def remove_favorite(self, favorite_id: int) -> list[FavoriteCity]:
        return self._favorites_store.remove(favorite_id)

    def clear_favorites(self) -> list[FavoriteCity]:
        return self._favorites_store.clear()
