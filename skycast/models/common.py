"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class TemperatureUnit(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_symbol(self) -> str:
        return "°C" if self is TemperatureUnit.METRIC else "°F"

    @property
    def wind_speed_label(self) -> str:
        return "m/s" if self is TemperatureUnit.METRIC else "mph"


def utc_now() -> datetime:
    return datetime.now(UTC)


def epoch_millis(dt: datetime | None = None) -> int:
    if dt is None:
        dt = utc_now()
    return int(dt.timestamp() * 1000)
