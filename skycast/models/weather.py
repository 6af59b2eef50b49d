"""Weather snapshot models built from OpenWeatherMap responses."""

from dataclasses import dataclass
from typing import TypeAlias

from skycast.models.common import TemperatureUnit


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


# A lookup is either a city name or a coordinate pair.
LocationQuery: TypeAlias = str | Coordinates


@dataclass(frozen=True)
class WeatherSnapshot:
    city: str
    country: str
    observed_at: int  # unix seconds
    timezone_offset: int  # seconds east of UTC
    temperature: float | None
    feels_like: float | None
    humidity: int | None
    pressure: int | None
    wind_speed: float | None
    condition_code: int | None
    description: str
    icon: str
    unit: TemperatureUnit


@dataclass(frozen=True)
class ForecastEntry:
    observed_at: int  # unix seconds
    temperature: float | None
    condition_code: int | None
    description: str
    icon: str
    unit: TemperatureUnit


@dataclass(frozen=True)
class ForecastSnapshot:
    city: str
    timezone_offset: int
    entries: tuple[ForecastEntry, ...]
