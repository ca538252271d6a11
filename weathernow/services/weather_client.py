"""Weather client that talks to the WeatherNow backend proxy."""

import logging

import httpx
from pydantic import ValidationError

from ..i18n import Language
from ..models.config import ClientConfig
from ..models.weather import WeatherRecord

logger = logging.getLogger(__name__)

WEATHER_PATH = "/api/weather"


class WeatherClient:
    """Fetches current weather for a city name through the proxy.

    Failures of any kind are logged and reported as ``None``; nothing is
    retried.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: ClientConfig) -> "WeatherClient":
        return cls(base_url=config.proxy_url, timeout=config.timeout_seconds)

    async def fetch_weather(self, city: str, lang: Language | str = Language.KO) -> WeatherRecord | None:
        """Return the weather for ``city`` or ``None`` if it cannot be had."""
        if not city or not city.strip():
            return None

        params = {"city": city, "lang": Language.parse(lang).value}
        url = f"{self.base_url}{WEATHER_PATH}"
        logger.debug(f"Requesting weather from proxy: {url} {params}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)

            if response.is_error:
                logger.error(f"Proxy returned HTTP {response.status_code} for '{city}': {response.text}")
                return None

            return WeatherRecord.model_validate(response.json())

        except httpx.TimeoutException:
            logger.warning(f"Timeout fetching weather for '{city}'")

        except httpx.HTTPError as e:
            logger.error(f"Error fetching weather for '{city}': {e}")

        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            kind = "Invalid" if isinstance(e, ValidationError) else "Malformed"
            logger.error(f"{kind} weather response for '{city}': {e}")

        return None
