"""Tests for the upstream OpenWeather helpers."""

import httpx
import pytest

from weathernow.proxy.openweather import OpenWeatherClient, select_display_name, to_api_lang


class TestToApiLang:
    """Tests for UI language to upstream language mapping."""

    @pytest.mark.parametrize(
        "lang, expected",
        [("ko", "kr"), ("zh", "zh_cn"), ("en", "en"), ("fr", "en"), ("", "en")],
    )
    def test_mapping(self, lang, expected):
        """Test each supported code and the English default."""
        assert to_api_lang(lang) == expected


class TestSelectDisplayName:
    """Tests for choosing the city name shown to the user."""

    LOCATION = {
        "name": "Beijing",
        "local_names": {"ko": "베이징", "zh": "北京", "zh_cn": "北京市", "en": "Beijing"},
    }

    def test_korean(self):
        """Test that the Korean local name is preferred for ko."""
        assert select_display_name(self.LOCATION, "ko") == "베이징"

    def test_chinese_prefers_zh(self):
        """Test that zh is tried before zh_cn."""
        assert select_display_name(self.LOCATION, "zh") == "北京"

    def test_chinese_falls_back_to_zh_cn(self):
        """Test that zh_cn is used when there is no zh name."""
        location = {"name": "Shanghai", "local_names": {"zh_cn": "上海"}}
        assert select_display_name(location, "zh") == "上海"

    def test_missing_local_name_uses_canonical(self):
        """Test the canonical name when the language has no local name."""
        location = {"name": "Springfield", "local_names": {"ko": "스프링필드"}}
        assert select_display_name(location, "en") == "Springfield"

    def test_no_local_names(self):
        """Test the canonical name when local_names is absent."""
        assert select_display_name({"name": "Nowhere"}, "ko") == "Nowhere"

    def test_unknown_language_uses_canonical(self):
        """Test the canonical name for an unsupported language."""
        assert select_display_name(self.LOCATION, "fr") == "Beijing"


class TestOpenWeatherClient:
    """Tests for the upstream HTTP calls."""

    @pytest.fixture
    def requests(self):
        return []

    def make_client(self, requests, response):
        def handler(request):
            requests.append(request)
            return response

        return OpenWeatherClient(
            api_key="secret",
            base_url="https://openweather.test/",
            transport=httpx.MockTransport(handler),
        )

    def test_geocode_request(self, requests):
        """Test the geocoding query asks for a single match."""
        client = self.make_client(requests, httpx.Response(200, json=[{"name": "Seoul", "lat": 1, "lon": 2}]))
        location = client.geocode("서울")

        assert location == {"name": "Seoul", "lat": 1, "lon": 2}
        params = requests[0].url.params
        assert requests[0].url.path == "/geo/1.0/direct"
        assert params["q"] == "서울"
        assert params["limit"] == "1"
        assert params["appid"] == "secret"

    def test_geocode_no_match(self, requests):
        """Test that an empty result means no match."""
        client = self.make_client(requests, httpx.Response(200, json=[]))
        assert client.geocode("Atlantis") is None

    def test_geocode_error_object(self, requests):
        """Test that a non-list error body means no match."""
        client = self.make_client(requests, httpx.Response(401, json={"cod": 401, "message": "Invalid API key"}))
        assert client.geocode("Seoul") is None

    def test_current_weather_request(self, requests):
        """Test the weather query uses metric units and the given language."""
        client = self.make_client(requests, httpx.Response(200, json={"cod": 200}))
        response = client.current_weather(37.5, 127.0, "kr")

        assert response.status_code == 200
        params = requests[0].url.params
        assert requests[0].url.path == "/data/2.5/weather"
        assert params["lat"] == "37.5"
        assert params["lon"] == "127.0"
        assert params["units"] == "metric"
        assert params["lang"] == "kr"
        assert params["appid"] == "secret"
