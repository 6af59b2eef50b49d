"""Session state for the widget and the transitions that mutate it."""

from dataclasses import dataclass, field
from enum import StrEnum

from skycast.models.common import TemperatureUnit
from skycast.models.weather import ForecastSnapshot, WeatherSnapshot


class UiStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


@dataclass
class AppState:
    """Single owned state record for one session.

    Only the Orchestrator calls the transition methods; the render pipeline
    reads fields but never writes them.
    """

    unit: TemperatureUnit = TemperatureUnit.METRIC
    current_weather: WeatherSnapshot | None = None
    forecast: ForecastSnapshot | None = None
    current_city: str | None = None
    last_search: str | None = None
    is_loading: bool = False
    initializing: bool = True
    user_has_interacted: bool = False
    status: UiStatus = UiStatus.IDLE
    error_message: str | None = None
    history: list[UiStatus] = field(default_factory=list)

    def _enter(self, status: UiStatus) -> None:
        self.status = status
        self.history.append(status)

    def begin_loading(self) -> None:
        self.is_loading = True
        self.error_message = None
        self._enter(UiStatus.LOADING)

    def succeed(
        self, weather: WeatherSnapshot, forecast: ForecastSnapshot, city: str
    ) -> None:
        self.current_weather = weather
        self.forecast = forecast
        self.current_city = city
        self.last_search = city
        self.is_loading = False
        self._enter(UiStatus.SUCCESS)

    def fail(self, message: str) -> None:
        self.is_loading = False
        self.error_message = message
        self._enter(UiStatus.ERROR)

    def set_unit(self, unit: TemperatureUnit) -> bool:
        """Returns True when the preference actually changed."""
        if unit == self.unit:
            return False
        self.unit = unit
        return True

    def restore(self, unit: TemperatureUnit, last_search: str | None) -> None:
        self.unit = unit
        self.last_search = last_search

    def mark_interacted(self) -> None:
        self.user_has_interacted = True

    def finish_initializing(self) -> None:
        self.initializing = False
