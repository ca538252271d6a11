"""Backend proxy that keeps the OpenWeather credential off the client."""

import httpx
from flask import Flask
from flask_cors import CORS

from .config import Config
from .openweather import OpenWeatherClient


class ConfigurationError(RuntimeError):
    """The proxy cannot start with the given configuration."""


def create_app(config_class=None, transport: httpx.BaseTransport | None = None):
    app = Flask(__name__)
    app.config.from_object(config_class or Config)

    api_key = app.config.get("OPENWEATHER_API_KEY")
    if not api_key:
        raise ConfigurationError("OPENWEATHER_API_KEY is not set; add it to the environment or .env")

    CORS(app)
    # Keep non-ASCII city names readable in responses
    app.json.ensure_ascii = False

    app.extensions["openweather"] = OpenWeatherClient(
        api_key=api_key,
        base_url=app.config["OPENWEATHER_BASE_URL"],
        timeout=app.config["UPSTREAM_TIMEOUT"],
        transport=transport,
    )

    from .routes import register_blueprints

    register_blueprints(app)

    return app
