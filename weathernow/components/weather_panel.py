"""Weather panel component for displaying the current search result."""

from textual.app import ComposeResult
from textual.widgets import Static

from ..i18n import Translations
from ..models.weather import WeatherRecord
from .markup import escape_markup


class WeatherPanel(Static):
    """Panel showing one city's current weather, or a "no result" note."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
        margin: 1 0;
    }

    WeatherPanel #weather-name {
        text-style: bold;
    }

    WeatherPanel #weather-details {
        display: none;
    }

    WeatherPanel #weather-details.visible {
        display: block;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._weather: WeatherRecord | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="weather-name")
        yield Static("", id="weather-details")

    def _temp_color(self, temp: float) -> str:
        """Get color for temperature value."""
        if temp <= 0:
            return "blue"
        elif temp <= 10:
            return "cyan"
        elif temp <= 20:
            return "green"
        elif temp <= 30:
            return "yellow"
        return "red"

    def update_weather(self, weather: WeatherRecord | None, t: Translations) -> None:
        """Show ``weather`` with labels from ``t``."""
        self._weather = weather

        name_widget = self.query_one("#weather-name", Static)
        details_widget = self.query_one("#weather-details", Static)

        if weather is None:
            name_widget.update(f"[dim]{t.no_result}[/dim]")
            details_widget.update("")
            details_widget.remove_class("visible")
            return

        tc = self._temp_color(weather.temperature_c)
        name_widget.update(escape_markup(weather.name))
        details_widget.update(
            f"🌡 {t.temperature}: [{tc}]{weather.temperature_c:g}°C[/{tc}]\n"
            f"💧 {t.humidity}: {weather.humidity_pct:g}%\n"
            f"🍃 {t.wind}: {weather.wind_speed_ms:g} m/s\n"
            f"{escape_markup(weather.description)}"
        )
        details_widget.add_class("visible")
