"""Tests for weather and favorite data models."""

import pytest
from pydantic import ValidationError

from weathernow.models.favorite import FavoriteCity
from weathernow.models.weather import WeatherRecord


class TestWeatherRecord:
    """Tests for WeatherRecord model."""

    def test_from_proxy_body(self):
        """Test reading the fixed paths of a proxy response."""
        record = WeatherRecord.model_validate(
            {
                "name": "서울",
                "main": {"temp": 5, "humidity": 40, "pressure": 1020},
                "wind": {"speed": 2, "deg": 180},
                "weather": [{"description": "맑음"}, {"description": "안개"}],
                "cod": 200,
            }
        )
        assert record.name == "서울"
        assert record.temperature_c == 5
        assert record.humidity_pct == 40
        assert record.wind_speed_ms == 2
        assert record.description == "맑음"

    def test_missing_main_rejected(self):
        """Test that a body without the main section is invalid."""
        with pytest.raises(ValidationError):
            WeatherRecord.model_validate(
                {"name": "X", "wind": {"speed": 1}, "weather": [{"description": "d"}]}
            )

    def test_empty_weather_list_rejected(self):
        """Test that a body without a condition entry is invalid."""
        with pytest.raises(ValidationError):
            WeatherRecord.model_validate(
                {
                    "name": "X",
                    "main": {"temp": 1, "humidity": 1},
                    "wind": {"speed": 1},
                    "weather": [],
                }
            )


class TestFavoriteCity:
    """Tests for FavoriteCity model."""

    def test_from_storage_layout(self):
        """Test reading the persisted {id, name, temp, memo} layout."""
        item = FavoriteCity.model_validate({"id": 1, "name": "Tokyo", "temp": 12, "memo": "trip"})
        assert item.id == 1
        assert item.name == "Tokyo"
        assert item.temperature == 12
        assert item.memo == "trip"

    def test_memo_defaults_to_empty(self):
        """Test that memo defaults to an empty string."""
        item = FavoriteCity(id=1, name="Tokyo", temperature=12)
        assert item.memo == ""

    def test_to_storage(self):
        """Test the persisted representation uses the temp key."""
        item = FavoriteCity(id=7, name="Paris", temperature=18.5, memo="")
        assert item.to_storage() == {"id": 7, "name": "Paris", "temp": 18.5, "memo": ""}

    def test_frozen(self):
        """Test that entries cannot be changed in place."""
        item = FavoriteCity(id=1, name="Tokyo", temperature=12)
        with pytest.raises(ValidationError):
            item.memo = "changed"
