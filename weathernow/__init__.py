"""WeatherNow - localized weather lookup with a favorites list."""

__version__ = "0.1.0"
