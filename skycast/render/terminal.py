"""Plain-text presenter that writes the widget to a terminal stream."""

import sys
from typing import TextIO

from skycast.config.defaults import SuggestedCity
from skycast.models.common import TemperatureUnit
from skycast.render.presenter import CurrentConditionsView, ForecastCardView
from skycast.render.theme import Effect, Theme

_THEME_ICONS = {
    Effect.HEAVY_RAIN: "⛈️",
    Effect.RAIN: "🌧️",
    Effect.SNOW: "❄️",
    Effect.STARS: "🌙",
}


class TerminalPresenter:
    def __init__(self, out: TextIO | None = None, quiet: bool = False):
        self.out = out or sys.stdout
        self.quiet = quiet
        self._theme: Theme | None = None

    def _print(self, line: str = "") -> None:
        print(line, file=self.out)

    def show_loading(self, message: str) -> None:
        if not self.quiet:
            self._print(f"… {message}")

    def show_error(self, message: str) -> None:
        self._print(f"❌ {message}")

    def show_content(self) -> None:
        pass

    def show_weather(self, view: CurrentConditionsView) -> None:
        icon = _THEME_ICONS.get(self._theme.effect, "") if self._theme else ""
        place = f"{view.city}, {view.country}" if view.country else view.city
        self._print(f"{icon} {place} | {view.local_time}".strip())
        self._print(f"  {view.temperature}  {view.description}")
        self._print(
            f"  Feels like {view.feels_like} | Humidity {view.humidity} | "
            f"Wind {view.wind_speed} | Pressure {view.pressure}"
        )

    def show_forecast(self, cards: list[ForecastCardView]) -> None:
        if not cards:
            return
        self._print("  Forecast:")
        for card in cards:
            self._print(f"    {card.day:<4} {card.temperature:>6}  {card.description}")

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme

    def set_unit(self, unit: TemperatureUnit) -> None:
        pass

    def set_input(self, value: str) -> None:
        pass

    def show_suggestions(self, cities: list[SuggestedCity]) -> None:
        for city in cities:
            self._print(f"  {city.name} ({city.country})")

    def hide_suggestions(self) -> None:
        pass

    def announce(self, message: str) -> None:
        # Errors were already printed by show_error.
        if self.quiet or message.startswith("Error:"):
            return
        self._print(f"✅ {message}")
