"""Parse OpenWeatherMap bodies into snapshots and reduce forecasts to one reading per day."""

import logging
from datetime import UTC, date, datetime, timedelta
from typing import Any

from skycast.ingest.errors import MalformedResponseError
from skycast.models.common import TemperatureUnit
from skycast.models.weather import ForecastEntry, ForecastSnapshot, WeatherSnapshot

logger = logging.getLogger(__name__)

MAX_FORECAST_DAYS = 5
DEFAULT_ICON = "01d"


def parse_current_weather(raw: Any, unit: TemperatureUnit) -> WeatherSnapshot:
    if not isinstance(raw, dict):
        raise MalformedResponseError("current weather body is not an object")

    main = raw.get("main") or {}
    wind = raw.get("wind") or {}
    sys = raw.get("sys") or {}
    weather = _first_condition(raw)

    return WeatherSnapshot(
        city=str(raw.get("name") or "Unknown City"),
        country=str(sys.get("country") or ""),
        observed_at=int(raw.get("dt") or 0),
        timezone_offset=int(raw.get("timezone") or 0),
        temperature=_number(main.get("temp")),
        feels_like=_number(main.get("feels_like")),
        humidity=_integer(main.get("humidity")),
        pressure=_integer(main.get("pressure")),
        wind_speed=_number(wind.get("speed")),
        condition_code=_integer(weather.get("id")),
        description=str(weather.get("description") or "Unknown"),
        icon=str(weather.get("icon") or ""),
        unit=unit,
    )


def parse_forecast(raw: Any, unit: TemperatureUnit) -> ForecastSnapshot:
    if not isinstance(raw, dict):
        raise MalformedResponseError("forecast body is not an object")
    samples = raw.get("list") or []
    if not isinstance(samples, list):
        raise MalformedResponseError("forecast list is not an array")

    city = raw.get("city") or {}
    tz_offset = int(city.get("timezone") or 0)
    daily = group_forecast_by_day(samples, tz_offset)

    entries = []
    for item in daily:
        weather = _first_condition(item)
        entries.append(
            ForecastEntry(
                observed_at=int(item.get("dt") or 0),
                temperature=_number((item.get("main") or {}).get("temp")),
                condition_code=_integer(weather.get("id")),
                description=str(weather.get("description") or "Unknown"),
                icon=str(weather.get("icon") or DEFAULT_ICON),
                unit=unit,
            )
        )

    return ForecastSnapshot(
        city=str(city.get("name") or ""),
        timezone_offset=tz_offset,
        entries=tuple(entries),
    )


def group_forecast_by_day(
    samples: list[dict], tz_offset: int = 0, max_days: int = MAX_FORECAST_DAYS
) -> list[dict]:
    """Keep the first chronological reading of each calendar day.

    Samples are sorted by timestamp; the day is taken in the city's local
    time. Collection stops once ``max_days`` distinct days are found.
    """
    ordered = sorted(
        (s for s in samples if isinstance(s, dict) and s.get("dt") is not None),
        key=lambda s: int(s["dt"]),
    )

    daily: list[dict] = []
    seen: set[date] = set()
    for sample in ordered:
        day = local_date(int(sample["dt"]), tz_offset)
        if day in seen:
            continue
        seen.add(day)
        daily.append(sample)
        if len(daily) >= max_days:
            break

    if len(ordered) != len(samples):
        logger.debug("Dropped %d forecast samples without a timestamp", len(samples) - len(ordered))
    return daily


def local_date(timestamp: int, tz_offset: int = 0) -> date:
    return local_datetime(timestamp, tz_offset).date()


def local_datetime(timestamp: int, tz_offset: int = 0) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=UTC) + timedelta(seconds=tz_offset)


def _first_condition(raw: dict) -> dict:
    conditions = raw.get("weather") or []
    if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
        return conditions[0]
    return {}


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _integer(value: Any) -> int | None:
    num = _number(value)
    return int(num) if num is not None else None
