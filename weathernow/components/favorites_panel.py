"""Favorites panel component for managing saved cities."""

import logging
from collections.abc import Sequence

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, Label, Static

from ..i18n import Translations
from ..models.favorite import FavoriteCity
from .markup import escape_markup

logger = logging.getLogger(__name__)


class FavoriteRow(Horizontal):
    """A single favorite: name, temperature snapshot, memo field, delete button."""

    def __init__(self, item: FavoriteCity, t: Translations) -> None:
        super().__init__(classes="favorite-item")
        self.favorite = item
        self._t = t
        self._memo = item.memo

    def compose(self) -> ComposeResult:
        with Vertical(classes="favorite-main"):
            yield Static(
                f"[bold]{escape_markup(self.favorite.name)}[/bold]  {self.favorite.temperature:g}°C",
                classes="favorite-title",
            )
            yield Input(
                value=self.favorite.memo,
                placeholder=self._t.memo_placeholder,
                classes="favorite-memo",
            )
        yield Button(self._t.delete, variant="error", classes="favorite-delete")

    @on(Input.Changed, ".favorite-memo")
    def _memo_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value == self._memo:
            return
        self._memo = event.value
        self.post_message(FavoritesPanel.MemoChanged(self.favorite.id, event.value))

    @on(Button.Pressed, ".favorite-delete")
    def _delete_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(FavoritesPanel.RemoveRequested(self.favorite.id))


class FavoritesPanel(Vertical):
    """Panel listing every favorite with memo editing and removal."""

    DEFAULT_CSS = """
    FavoritesPanel {
        height: 1fr;
        padding: 0 1;
    }

    FavoritesPanel #favorites-title {
        text-style: bold;
        padding: 0 0 1 0;
    }

    FavoritesPanel #favorites-empty {
        color: $text-muted;
        padding: 1;
    }

    FavoritesPanel #favorites-list {
        height: 1fr;
    }

    FavoritesPanel .favorite-item {
        height: auto;
        border: solid $primary-darken-2;
        padding: 0 1;
    }

    FavoritesPanel .favorite-main {
        width: 1fr;
        height: auto;
    }

    FavoritesPanel .favorite-delete {
        margin-left: 1;
    }

    FavoritesPanel #favorites-clear {
        margin-top: 1;
    }
    """

    class MemoChanged(Message):
        """Message sent when the memo of a favorite is edited."""

        def __init__(self, favorite_id: int, memo: str) -> None:
            super().__init__()
            self.favorite_id = favorite_id
            self.memo = memo

    class RemoveRequested(Message):
        """Message sent when the user deletes one favorite."""

        def __init__(self, favorite_id: int) -> None:
            super().__init__()
            self.favorite_id = favorite_id

    class ClearRequested(Message):
        """Message sent when the user clears every favorite."""

        pass

    def compose(self) -> ComposeResult:
        yield Label("", id="favorites-title")
        yield Label("", id="favorites-empty")
        yield VerticalScroll(id="favorites-list")
        yield Button("", variant="warning", id="favorites-clear")

    async def update_favorites(self, favorites: Sequence[FavoriteCity], t: Translations) -> None:
        """Rebuild the list from ``favorites``."""
        self.query_one("#favorites-title", Label).update(t.favorites_title)

        empty_label = self.query_one("#favorites-empty", Label)
        empty_label.update(t.favorites_empty)
        empty_label.display = not favorites

        clear_button = self.query_one("#favorites-clear", Button)
        clear_button.label = t.clear_all
        clear_button.display = bool(favorites)

        favorites_list = self.query_one("#favorites-list", VerticalScroll)
        await favorites_list.remove_children()
        if favorites:
            await favorites_list.mount(*(FavoriteRow(item, t) for item in favorites))

        logger.debug(f"Favorites panel showing {len(favorites)} entries")

    @on(Button.Pressed, "#favorites-clear")
    def _clear_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.ClearRequested())
