"""Upstream OpenWeather geocoding and current-weather calls."""

import logging

import httpx

logger = logging.getLogger(__name__)

GEOCODING_PATH = "/geo/1.0/direct"
WEATHER_PATH = "/data/2.5/weather"

# UI language -> OpenWeather "lang" parameter
API_LANG_MAP = {
    "ko": "kr",
    "zh": "zh_cn",
    "en": "en",
}
DEFAULT_API_LANG = "en"

# UI language -> keys tried in the geocoder's local_names, in order
LOCAL_NAME_KEYS = {
    "ko": ("ko",),
    "zh": ("zh", "zh_cn"),
    "en": ("en",),
}


def to_api_lang(lang: str) -> str:
    """Map a UI language code to the upstream one, defaulting to English."""
    return API_LANG_MAP.get(lang, DEFAULT_API_LANG)


def select_display_name(location: dict, lang: str) -> str:
    """Prefer the local name for ``lang``; otherwise the canonical name."""
    local_names = location.get("local_names") or {}
    for key in LOCAL_NAME_KEYS.get(lang, ()):
        if local_names.get(key):
            return local_names[key]
    return location.get("name", "")


class OpenWeatherClient:
    """Thin synchronous wrapper around the two upstream endpoints."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _get(self, path: str, params: dict) -> httpx.Response:
        params = {**params, "appid": self.api_key}
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            return client.get(f"{self.base_url}{path}", params=params)

    def geocode(self, city: str) -> dict | None:
        """Resolve ``city`` to its best match, or ``None`` when nothing matches.

        The match carries ``lat``, ``lon``, ``name`` and ``local_names``.
        """
        response = self._get(GEOCODING_PATH, {"q": city, "limit": 1})
        data = response.json()

        if not isinstance(data, list) or not data:
            logger.info(f"No geocoding match for '{city}' (HTTP {response.status_code})")
            return None

        return data[0]

    def current_weather(self, lat: float, lon: float, api_lang: str) -> httpx.Response:
        """Fetch metric current weather with descriptions in ``api_lang``."""
        params = {
            "lat": lat,
            "lon": lon,
            "units": "metric",
            "lang": api_lang,
        }
        return self._get(WEATHER_PATH, params)
