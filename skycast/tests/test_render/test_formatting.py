"""Tests for unit conversion and display formatting."""

import pytest

from skycast.models.common import TemperatureUnit
from skycast.render.formatting import (
    PLACEHOLDER,
    convert_wind_speed,
    format_day_name,
    format_humidity,
    format_local_time,
    format_pressure,
    format_temperature,
    format_wind_speed,
    icon_url,
    round_half_up,
    to_celsius,
)

METRIC = TemperatureUnit.METRIC
IMPERIAL = TemperatureUnit.IMPERIAL


class TestTemperature:
    @pytest.mark.parametrize(
        "celsius,expected",
        [(0, "32°F"), (100, "212°F"), (-40, "-40°F"), (14.2, "58°F")],
    )
    def test_celsius_to_fahrenheit(self, celsius: float, expected: str):
        assert format_temperature(celsius, METRIC, IMPERIAL) == expected

    def test_fahrenheit_to_celsius(self):
        assert format_temperature(212, IMPERIAL, METRIC) == "100°C"
        assert to_celsius(32) == 0

    def test_same_unit_only_rounds(self):
        assert format_temperature(14.2, METRIC, METRIC) == "14°C"

    def test_missing_value(self):
        assert format_temperature(None, METRIC, METRIC) == PLACEHOLDER
        assert format_temperature(float("nan"), METRIC, METRIC) == PLACEHOLDER


class TestRounding:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (-0.5, 0), (2.5, 3), (-2.5, -2), (2.4, 2), (-2.6, -3)],
    )
    def test_halves_round_up(self, value: float, expected: int):
        assert round_half_up(value) == expected

    def test_negative_half_degree(self):
        assert format_temperature(-2.5, METRIC, METRIC) == "-2°C"
        assert format_temperature(-0.5, METRIC, METRIC) == "0°C"


class TestWindSpeed:
    def test_to_mph(self):
        assert format_wind_speed(4.63, METRIC, IMPERIAL) == "10 mph"

    def test_metric(self):
        assert format_wind_speed(4.63, METRIC, METRIC) == "5 m/s"

    def test_back_to_mps(self):
        assert convert_wind_speed(2.236936, IMPERIAL, METRIC) == pytest.approx(1.0)


class TestOtherReadings:
    def test_humidity(self):
        assert format_humidity(77) == "77%"
        assert format_humidity(None) == PLACEHOLDER

    def test_pressure(self):
        assert format_pressure(1012) == "1012 hPa"

    def test_local_time_uses_offset(self):
        # 12:00 UTC in a UTC+1 city
        assert format_local_time(1760875200, 3600) == "01:00 PM"

    def test_local_time_unavailable(self):
        assert format_local_time(0) == "Time unavailable"

    def test_day_name(self):
        assert format_day_name(1760875200, 3600) == "Sun"

    def test_icon_url(self):
        assert icon_url("04d") == "https://openweathermap.org/img/wn/04d@2x.png"
