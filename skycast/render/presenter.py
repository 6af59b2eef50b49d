"""Presenter capability interface and the view models it receives."""

from dataclasses import dataclass
from typing import Protocol

from skycast.config.defaults import SuggestedCity
from skycast.models.common import TemperatureUnit
from skycast.render.theme import Theme


@dataclass(frozen=True)
class CurrentConditionsView:
    city: str
    country: str
    local_time: str
    temperature: str
    feels_like: str
    humidity: str
    wind_speed: str
    pressure: str
    description: str
    icon_url: str | None


@dataclass(frozen=True)
class ForecastCardView:
    day: str
    icon_url: str
    temperature: str
    description: str


class Presenter(Protocol):
    """Anything that can show the widget: a terminal, a GUI, a test double.

    All strings handed over are already sanitized.
    """

    def show_loading(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_content(self) -> None: ...

    def show_weather(self, view: CurrentConditionsView) -> None: ...

    def show_forecast(self, cards: list[ForecastCardView]) -> None:
        """Replace any previously shown cards."""
        ...

    def set_theme(self, theme: Theme) -> None: ...

    def set_unit(self, unit: TemperatureUnit) -> None: ...

    def set_input(self, value: str) -> None: ...

    def show_suggestions(self, cities: list[SuggestedCity]) -> None: ...

    def hide_suggestions(self) -> None: ...

    def announce(self, message: str) -> None:
        """Plain-text status line for screen readers."""
        ...
