"""Tests for weather URL construction."""

from skycast.ingest.request_builder import (
    build_weather_url,
    forecast_params,
    location_params,
)
from skycast.models.common import TemperatureUnit
from skycast.models.weather import Coordinates

BASE = "https://api.openweathermap.org/data/2.5"


class TestBuildWeatherUrl:
    def test_city_query(self):
        url = build_weather_url(
            BASE, "/weather", {"q": "London", "units": "metric"}, "KEY"
        )
        assert url == f"{BASE}/weather?q=London&units=metric&appid=KEY"

    def test_percent_encoding(self):
        url = build_weather_url(BASE, "/weather", {"q": "New York, US"}, "K&Y")
        assert url == f"{BASE}/weather?q=New%20York%2C%20US&appid=K%26Y"

    def test_apostrophe_and_parentheses_kept(self):
        url = build_weather_url(BASE, "/weather", {"q": "St. John's (NL)"}, "K")
        assert "q=St.%20John's%20(NL)" in url

    def test_trailing_slash_on_base(self):
        url = build_weather_url(BASE + "/", "/forecast", {}, "K")
        assert url == f"{BASE}/forecast?appid=K"

    def test_credential_last(self):
        url = build_weather_url(BASE, "/weather", {"lat": 1, "lon": 2}, "K")
        assert url.endswith("&appid=K")


class TestParams:
    def test_city_params(self):
        assert location_params("Paris", TemperatureUnit.IMPERIAL) == {
            "q": "Paris",
            "units": "imperial",
        }

    def test_coordinate_params(self):
        params = location_params(Coordinates(51.5, -0.12), TemperatureUnit.METRIC)
        assert params == {"lat": 51.5, "lon": -0.12, "units": "metric"}

    def test_forecast_adds_count(self):
        params = forecast_params("Oslo", TemperatureUnit.METRIC, 5)
        assert params["cnt"] == 5
        assert params["q"] == "Oslo"
