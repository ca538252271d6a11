"""Pytest configuration and fixtures."""

import json
import tempfile
from collections.abc import Sequence
from pathlib import Path

import httpx
import pytest

from weathernow.models.favorite import FavoriteCity
from weathernow.models.weather import WeatherRecord
from weathernow.proxy import create_app
from weathernow.proxy.config import TestConfig

SEOUL_GEOCODE = {
    "name": "Seoul",
    "lat": 37.5667,
    "lon": 126.9783,
    "country": "KR",
    "local_names": {"ko": "서울", "zh": "首尔", "en": "Seoul"},
}

SEOUL_WEATHER = {
    "coord": {"lon": 126.9783, "lat": 37.5667},
    "weather": [{"id": 800, "main": "Clear", "description": "맑음", "icon": "01d"}],
    "main": {"temp": 5, "humidity": 40},
    "wind": {"speed": 2},
    "cod": 200,
    "name": "Seoul",
}


def make_record(name: str = "Seoul", temp: float = 5, humidity: float = 40, wind: float = 2,
                description: str = "clear sky") -> WeatherRecord:
    """Build a proxy-shaped weather record."""
    return WeatherRecord.model_validate(
        {
            "name": name,
            "main": {"temp": temp, "humidity": humidity},
            "wind": {"speed": wind},
            "weather": [{"description": description}],
        }
    )


class InMemoryRepository:
    """Favorites repository that keeps every saved list for inspection."""

    def __init__(self, initial: Sequence[FavoriteCity] = ()):
        self.stored = list(initial)
        self.saves: list[list[FavoriteCity]] = []

    def load(self) -> list[FavoriteCity]:
        return list(self.stored)

    def save(self, favorites: Sequence[FavoriteCity]) -> None:
        self.stored = list(favorites)
        self.saves.append(list(favorites))


class FakeUpstream:
    """Stands in for the OpenWeather geocoding and weather endpoints."""

    def __init__(self):
        self.geocode_status = 200
        self.geocode_body: object = [SEOUL_GEOCODE]
        self.weather_status = 200
        self.weather_body: object = SEOUL_WEATHER
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.path == "/geo/1.0/direct":
            return httpx.Response(self.geocode_status, json=self.geocode_body)
        if request.url.path == "/data/2.5/weather":
            return httpx.Response(self.weather_status, json=self.weather_body)
        return httpx.Response(404, json={"cod": "404", "message": "unknown path"})

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "client": {
            "proxy_url": "https://weather-proxy.example.com/",
            "timeout_seconds": 10,
        },
        "storage": {
            "data_dir": "data",
            "favorites_key": "my-favorites",
        },
        "settings": {
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def app(upstream):
    """Proxy app whose upstream calls are answered by ``upstream``."""
    return create_app(TestConfig, transport=httpx.MockTransport(upstream.handle))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_weather():
    """Factory for proxy-shaped weather records."""
    return make_record


@pytest.fixture
def memory_repository():
    return InMemoryRepository()


@pytest.fixture
def repository_factory():
    """Build an in-memory repository preloaded with favorites."""
    return InMemoryRepository
