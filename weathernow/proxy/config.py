"""Proxy configuration read from the environment (and a ``.env`` file)."""

import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY")
    OPENWEATHER_BASE_URL = os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org")
    UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "30"))

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    OPENWEATHER_API_KEY = "test-key"
    OPENWEATHER_BASE_URL = "https://openweather.test"
    UPSTREAM_TIMEOUT = 5.0
