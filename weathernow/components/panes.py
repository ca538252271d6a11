"""The two screens of the app: weather search and favorites management."""

from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Button, Input, TabPane

from ..i18n import Translations
from .favorites_panel import FavoritesPanel
from .favorites_preview import FavoritesPreview
from .weather_panel import WeatherPanel


class SearchPane(TabPane):
    """City search box, the weather card and a preview of the favorites."""

    DEFAULT_CSS = """
    SearchPane #search-container {
        height: auto;
    }

    SearchPane #city-input {
        width: 1fr;
    }

    SearchPane #add-favorite {
        display: none;
        margin-bottom: 1;
    }

    SearchPane #add-favorite.visible {
        display: block;
    }
    """

    def __init__(self, t: Translations) -> None:
        super().__init__(t.nav_search, id="pane-search")
        self._t = t

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            with Horizontal(id="search-container"):
                yield Input(placeholder=self._t.search_placeholder, id="city-input")
                yield Button(self._t.search_button, variant="primary", id="search-button")
            yield WeatherPanel()
            yield Button(self._t.add_favorite_button, variant="success", id="add-favorite")
            yield FavoritesPreview()

    def apply_translations(self, t: Translations) -> None:
        """Relabel the static parts of the pane."""
        self._t = t
        self.query_one("#city-input", Input).placeholder = t.search_placeholder
        self.query_one("#search-button", Button).label = t.search_button
        self.query_one("#add-favorite", Button).label = t.add_favorite_button

    def show_add_favorite(self, visible: bool) -> None:
        self.query_one("#add-favorite", Button).set_class(visible, "visible")


class FavoritesPane(TabPane):
    """Pane holding the favorites panel."""

    def __init__(self, t: Translations) -> None:
        super().__init__(t.nav_favorites, id="pane-favorites")

    def compose(self) -> ComposeResult:
        yield FavoritesPanel()
