"""Compact favorites list shown under the search result."""

from collections.abc import Sequence

from textual.widgets import Static

from ..i18n import Translations
from ..models.favorite import FavoriteCity
from .markup import escape_markup


class FavoritesPreview(Static):
    """Read-only ``name (temp°C)`` list with a hint to open the favorites tab."""

    DEFAULT_CSS = """
    FavoritesPreview {
        height: auto;
        padding: 0 1;
        border-top: solid $primary-darken-2;
    }
    """

    def update_preview(self, favorites: Sequence[FavoriteCity], t: Translations) -> None:
        self.display = bool(favorites)
        if not favorites:
            self.update("")
            return

        lines = [f"[bold]{t.preview_title}[/bold]"]
        lines.extend(f"• {escape_markup(item.name)} ({item.temperature:g}°C)" for item in favorites)
        lines.append(f"[dim]{t.preview_hint}[/dim]")
        self.update("\n".join(lines))
