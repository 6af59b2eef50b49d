"""Unit conversion and display formatting for readings."""

import math
from decimal import ROUND_FLOOR, Decimal

from skycast.ingest.parser import local_datetime
from skycast.models.common import TemperatureUnit

MPS_TO_MPH = 2.236936
PLACEHOLDER = "--"
ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


def to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def convert_temperature(
    value: float, source: TemperatureUnit, target: TemperatureUnit
) -> float:
    if source == target:
        return value
    if target is TemperatureUnit.IMPERIAL:
        return to_fahrenheit(value)
    return to_celsius(value)


def convert_wind_speed(
    value: float, source: TemperatureUnit, target: TemperatureUnit
) -> float:
    if source == target:
        return value
    if target is TemperatureUnit.IMPERIAL:
        return value * MPS_TO_MPH
    return value / MPS_TO_MPH


def round_half_up(value: float) -> int:
    """Nearest whole number, halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    shifted = Decimal(repr(value)) + Decimal("0.5")
    return int(shifted.quantize(Decimal(1), rounding=ROUND_FLOOR))


def format_temperature(
    value: float | None, source: TemperatureUnit, target: TemperatureUnit
) -> str:
    if not _present(value):
        return PLACEHOLDER
    converted = convert_temperature(value, source, target)
    return f"{round_half_up(converted)}{target.temperature_symbol}"


def format_wind_speed(
    value: float | None, source: TemperatureUnit, target: TemperatureUnit
) -> str:
    if not _present(value):
        return PLACEHOLDER
    converted = convert_wind_speed(value, source, target)
    return f"{round_half_up(converted)} {target.wind_speed_label}"


def format_humidity(value: int | None) -> str:
    return f"{value}%" if value is not None else PLACEHOLDER


def format_pressure(value: int | None) -> str:
    return f"{value} hPa" if value is not None else PLACEHOLDER


def format_local_time(timestamp: int, tz_offset: int = 0) -> str:
    """Observation time as ``hh:mm AM`` in the city's local time."""
    if not timestamp:
        return "Time unavailable"
    try:
        return local_datetime(timestamp, tz_offset).strftime("%I:%M %p")
    except (ValueError, OverflowError, OSError):
        return "Time unavailable"


def format_day_name(timestamp: int, tz_offset: int = 0) -> str:
    return local_datetime(timestamp, tz_offset).strftime("%a")


def icon_url(icon: str) -> str:
    return ICON_URL.format(icon=icon)


def _present(value: float | None) -> bool:
    return value is not None and math.isfinite(value)
