"""Map snapshots to presenter updates in the user's preferred unit."""

import logging

from skycast.ingest.validation import sanitize_text
from skycast.models.common import TemperatureUnit
from skycast.models.weather import ForecastSnapshot, WeatherSnapshot
from skycast.render.formatting import (
    format_day_name,
    format_humidity,
    format_local_time,
    format_pressure,
    format_temperature,
    format_wind_speed,
    icon_url,
)
from skycast.render.presenter import CurrentConditionsView, ForecastCardView, Presenter
from skycast.render.theme import select_theme

logger = logging.getLogger(__name__)

DEFAULT_FORECAST_ICON = "01d"


def build_current_view(
    snapshot: WeatherSnapshot, unit: TemperatureUnit
) -> CurrentConditionsView:
    description = sanitize_text(snapshot.description) or "Unknown"
    return CurrentConditionsView(
        city=sanitize_text(snapshot.city) or "Unknown City",
        country=sanitize_text(snapshot.country),
        local_time=format_local_time(snapshot.observed_at, snapshot.timezone_offset),
        temperature=format_temperature(snapshot.temperature, snapshot.unit, unit),
        feels_like=format_temperature(snapshot.feels_like, snapshot.unit, unit),
        humidity=format_humidity(snapshot.humidity),
        wind_speed=format_wind_speed(snapshot.wind_speed, snapshot.unit, unit),
        pressure=format_pressure(snapshot.pressure),
        description=description,
        icon_url=icon_url(sanitize_text(snapshot.icon)) if snapshot.icon else None,
    )


def render_current_weather(
    snapshot: WeatherSnapshot, unit: TemperatureUnit, presenter: Presenter
) -> CurrentConditionsView:
    view = build_current_view(snapshot, unit)
    if snapshot.icon:
        presenter.set_theme(select_theme(snapshot.condition_code, snapshot.icon))
    presenter.show_weather(view)
    return view


def render_forecast(
    forecast: ForecastSnapshot, unit: TemperatureUnit, presenter: Presenter
) -> list[ForecastCardView]:
    cards = [
        ForecastCardView(
            day=format_day_name(entry.observed_at, forecast.timezone_offset),
            icon_url=icon_url(sanitize_text(entry.icon) or DEFAULT_FORECAST_ICON),
            temperature=format_temperature(entry.temperature, entry.unit, unit),
            description=sanitize_text(entry.description) or "Unknown",
        )
        for entry in forecast.entries
    ]
    logger.debug("Rendering %d forecast cards", len(cards))
    presenter.show_forecast(cards)
    return cards
