"""Terminal UI for WeatherNow: weather search plus a favorites list."""

import logging
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Button, Header, Input, TabbedContent

from .components import (
    FavoritesPane,
    FavoritesPanel,
    FavoritesPreview,
    LanguageSwitch,
    SearchPane,
    StatusBar,
    WeatherPanel,
)
from .models.config import Config
from .services.favorites_store import FavoritesStore, JsonFavoritesRepository
from .services.weather_client import WeatherClient
from .state import AppState

logger = logging.getLogger(__name__)


def build_state(config: Config) -> AppState:
    """Wire the weather client and the persisted favorites store."""
    repository = JsonFavoritesRepository(config.storage.favorites_path)
    return AppState(
        weather_client=WeatherClient.from_config(config.client),
        favorites_store=FavoritesStore(repository),
    )


class WeatherNowApp(App):
    """Root view. Owns the AppState and routes widget messages to its actions."""

    CSS = """
    #lang-bar {
        height: auto;
        padding: 0 1;
    }

    TabbedContent {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("f1", "show_tab('pane-search')", "Search", show=True),
        Binding("f2", "show_tab('pane-favorites')", "Favorites", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: Config | None = None,
        config_path: Path | str | None = None,
        state: AppState | None = None,
    ) -> None:
        super().__init__()
        if config is None:
            config = Config.load_or_default(config_path or "config.json")
        self.config = config
        self.state = state or build_state(config)

    def compose(self) -> ComposeResult:
        t = self.state.translations
        yield Header()
        yield LanguageSwitch(self.state.lang, id="lang-bar")
        with TabbedContent(initial="pane-search"):
            yield SearchPane(t)
            yield FavoritesPane(t)
        yield StatusBar()

    async def on_mount(self) -> None:
        logger.info(f"WeatherNow started with proxy {self.config.client.proxy_url}")
        self._apply_language()
        self._refresh_weather()
        await self._refresh_favorites()

    # Rendering from state

    def _apply_language(self) -> None:
        t = self.state.translations
        self.title = t.app_title

        tabs = self.query_one(TabbedContent)
        tabs.get_tab("pane-search").label = t.nav_search
        tabs.get_tab("pane-favorites").label = t.nav_favorites

        self.query_one(SearchPane).apply_translations(t)
        self.query_one(LanguageSwitch).set_active(self.state.lang)
        self.query_one(StatusBar).set_footer(t.footer_text)

    def _refresh_weather(self) -> None:
        weather = self.state.weather
        self.query_one(WeatherPanel).update_weather(weather, self.state.translations)
        self.query_one(SearchPane).show_add_favorite(weather is not None)

    def _refresh_preview(self) -> None:
        self.query_one(FavoritesPreview).update_preview(self.state.favorites, self.state.translations)

    async def _refresh_favorites(self) -> None:
        await self.query_one(FavoritesPanel).update_favorites(
            self.state.favorites, self.state.translations
        )
        self._refresh_preview()

    # Search

    @on(Input.Changed, "#city-input")
    def city_changed(self, event: Input.Changed) -> None:
        self.state.set_city(event.value)

    @on(Input.Submitted, "#city-input")
    @on(Button.Pressed, "#search-button")
    def start_search(self) -> None:
        if not self.state.city.strip():
            return
        self.run_worker(self._search(), group="search")

    async def _search(self) -> None:
        status = self.query_one(StatusBar)
        status.set_activity(self.state.translations.searching)
        try:
            await self.state.search()
        finally:
            status.clear_activity()
        self._refresh_weather()

    # Favorites

    @on(Button.Pressed, "#add-favorite")
    async def add_favorite(self) -> None:
        self.state.add_favorite()
        await self._refresh_favorites()

    def on_favorites_panel_memo_changed(self, event: FavoritesPanel.MemoChanged) -> None:
        self.state.update_memo(event.favorite_id, event.memo)
        self._refresh_preview()

    async def on_favorites_panel_remove_requested(self, event: FavoritesPanel.RemoveRequested) -> None:
        self.state.remove_favorite(event.favorite_id)
        await self._refresh_favorites()

    async def on_favorites_panel_clear_requested(self, event: FavoritesPanel.ClearRequested) -> None:
        self.state.clear_favorites()
        await self._refresh_favorites()

    # Language and navigation

    async def on_language_switch_language_selected(self, event: LanguageSwitch.LanguageSelected) -> None:
        self.state.change_language(event.lang)
        self._apply_language()
        self._refresh_weather()
        await self._refresh_favorites()

    def action_show_tab(self, tab: str) -> None:
        self.query_one(TabbedContent).active = tab
