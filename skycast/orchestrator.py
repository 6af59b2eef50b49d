"""Orchestrator: wires user actions to validation, fetching, rendering and persistence.

Every request runs as its own asyncio task. Starting a new one cancels the
task in flight (and any pending debounced search), so a superseded request
can never overwrite fresher state.
"""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from skycast.config.defaults import suggest_cities
from skycast.config.schema import WidgetConfig
from skycast.ingest.errors import classify_error
from skycast.ingest.geolocation import (
    GeolocationError,
    GeolocationErrorCode,
    Locator,
    locate_with_timeout,
)
from skycast.ingest.owm_client import OpenWeatherClient
from skycast.ingest.validation import (
    sanitize_text,
    validate_city_name,
    validate_coordinates,
)
from skycast.models.common import TemperatureUnit
from skycast.models.state import AppState, UiStatus
from skycast.models.weather import (
    Coordinates,
    ForecastSnapshot,
    LocationQuery,
    WeatherSnapshot,
)
from skycast.render.pipeline import render_current_weather, render_forecast
from skycast.render.presenter import Presenter
from skycast.storage.preference_store import PreferenceStore

logger = logging.getLogger(__name__)


async def fetch_pair(
    client: OpenWeatherClient, query: LocationQuery, unit: TemperatureUnit
) -> tuple[WeatherSnapshot, ForecastSnapshot]:
    """Fetch current conditions and forecast concurrently.

    The first failure cancels the sibling request and is re-raised as is.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            current = tg.create_task(client.fetch_current_weather(query, unit))
            forecast = tg.create_task(client.fetch_forecast(query, unit))
    except ExceptionGroup as eg:
        raise eg.exceptions[0] from None
    return current.result(), forecast.result()


class Orchestrator:
    def __init__(
        self,
        config: WidgetConfig,
        client: OpenWeatherClient,
        store: PreferenceStore,
        presenter: Presenter,
        locator: Locator | None = None,
        state: AppState | None = None,
    ):
        self.config = config
        self.messages = config.messages
        self.client = client
        self.store = store
        self.presenter = presenter
        self.locator = locator
        self.state = state or AppState(unit=config.app.default_unit)
        self._inflight: asyncio.Task | None = None
        self._debounce: asyncio.Task | None = None
        self._last_request: LocationQuery | None = None
        self._input_focused = False

    # --- Lifecycle ---

    def load_preferences(self) -> None:
        record = self.store.load()
        if record is not None:
            self.state.restore(record.temperature_unit, record.last_search)
            logger.info(
                "Restored preferences: unit=%s last_search=%s",
                record.temperature_unit, record.last_search,
            )
        self.presenter.set_unit(self.state.unit)

    async def start(self, city: str | None = None) -> UiStatus:
        """Load preferences, then show ``city``, the last search or the default city."""
        self.load_preferences()
        target = city or self.state.last_search or self.config.app.default_city
        logger.info("Initial load for %s", target)
        try:
            return await self.search(target)
        finally:
            self.state.finish_initializing()

    async def wait_idle(self) -> None:
        """Wait for any pending debounced search and in-flight request."""
        for task in (self._debounce, self._inflight):
            if task is not None and not task.done():
                try:
                    await task
                except asyncio.CancelledError:
                    pass

    # --- User actions ---

    async def search(self, city: str) -> UiStatus:
        city = city.strip() if isinstance(city, str) else ""
        if not city:
            return self._reject(self.messages.empty_search)
        if not validate_city_name(city):
            return self._reject(self.messages.invalid_input)

        self._set_input(city)
        return await self._run_exclusive(self._load(city))

    async def pick_suggestion(self, city: str) -> UiStatus:
        self.presenter.hide_suggestions()
        return await self.search(city)

    async def retry(self) -> UiStatus:
        """Re-issue the last request, falling back to the last successful city."""
        query = self._last_request or self.state.last_search
        if query is None:
            logger.info("Nothing to retry")
            return self.state.status
        if isinstance(query, Coordinates):
            return await self._run_exclusive(self._load(query))
        return await self.search(query)

    async def locate(self) -> UiStatus:
        if self.locator is None:
            return self._reject(self.messages.location_unsupported)
        return await self._run_exclusive(self._locate_and_load(self.locator))

    def set_unit(self, unit: TemperatureUnit | str) -> None:
        """Switch units and re-render what is on screen; never fetches."""
        unit = TemperatureUnit(unit)
        if not self.state.set_unit(unit):
            return
        logger.info("Temperature unit switched to %s", unit)
        self.presenter.set_unit(unit)
        self.store.save(unit, self.state.last_search)
        self._render()

    def on_focus(self) -> None:
        self._input_focused = True
        self.state.mark_interacted()

    def on_blur(self) -> None:
        self._input_focused = False

    def on_input(self, text: str) -> None:
        """Handle a keystroke in the search box. Must run inside the event loop."""
        self._input_focused = True
        self.state.mark_interacted()
        text = text.strip()

        suggestions = suggest_cities(text)
        if suggestions:
            self.presenter.show_suggestions(suggestions)
        else:
            self.presenter.hide_suggestions()

        self._cancel_debounce()
        if (
            len(text) > self.config.app.min_autosearch_chars
            and not self.state.initializing
            and self.state.user_has_interacted
        ):
            self._debounce = asyncio.create_task(self._debounced_search(text))

    # --- Internals ---

    async def _debounced_search(self, text: str) -> None:
        await asyncio.sleep(self.config.app.debounce_seconds)
        self._debounce = None
        if not self._input_focused or self.state.initializing:
            return
        if not validate_city_name(text):
            logger.debug("Skipping auto-search for invalid input")
            return
        await self.search(text)

    async def _run_exclusive(self, work: Coroutine[Any, Any, UiStatus]) -> UiStatus:
        self._supersede()
        task = asyncio.create_task(work)
        self._inflight = task
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if task.cancelled() and (current is None or current.cancelling() == 0):
                logger.info("Request superseded by a newer one")
                return self.state.status
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

    async def _load(self, query: LocationQuery, show_loading: bool = True) -> UiStatus:
        self._last_request = query
        by_coords = isinstance(query, Coordinates)
        label = "your location" if by_coords else query
        if show_loading:
            self._begin_loading(f"Loading weather for {label}...")

        try:
            weather, forecast = await fetch_pair(self.client, query, self.state.unit)
        except Exception as e:
            logger.error("Weather fetch for %s failed: %r", label, e)
            return self._fail(classify_error(e, self.messages))

        city = weather.city if by_coords else query
        self.state.succeed(weather, forecast, city)
        self.store.save(self.state.unit, self.state.last_search)
        self._render()
        self.presenter.show_content()
        if by_coords:
            self._announce(f"Weather loaded for your location: {city}")
        else:
            self._announce(f"Weather loaded for {city}")
        return UiStatus.SUCCESS

    async def _locate_and_load(self, locator: Locator) -> UiStatus:
        self._begin_loading("Getting your location...")
        timeout = self.config.app.geolocation_timeout_seconds
        try:
            coords = await locate_with_timeout(locator, timeout)
        except GeolocationError as e:
            logger.warning("Geolocation failed: %s", e.code)
            return self._fail(self._geolocation_message(e.code))
        except Exception:
            logger.exception("Geolocation crashed")
            return self._fail(self.messages.location_error)

        if not validate_coordinates(coords.lat, coords.lon):
            return self._fail(self.messages.invalid_coordinates)
        logger.info("Located at %.4f, %.4f", coords.lat, coords.lon)
        return await self._load(coords, show_loading=False)

    def _geolocation_message(self, code: GeolocationErrorCode) -> str:
        if code is GeolocationErrorCode.PERMISSION_DENIED:
            return self.messages.location_denied
        if code is GeolocationErrorCode.POSITION_UNAVAILABLE:
            return self.messages.location_unavailable
        if code is GeolocationErrorCode.TIMEOUT:
            return self.messages.location_timeout
        return self.messages.location_error

    def _render(self) -> None:
        if self.state.current_weather is not None:
            render_current_weather(self.state.current_weather, self.state.unit, self.presenter)
        if self.state.forecast is not None:
            render_forecast(self.state.forecast, self.state.unit, self.presenter)

    def _set_input(self, value: str) -> None:
        # Never overwrite what the user is typing.
        if not self.state.user_has_interacted:
            self.presenter.set_input(value)

    def _begin_loading(self, message: str) -> None:
        self.state.begin_loading()
        self.presenter.show_loading(sanitize_text(message))

    def _reject(self, message: str) -> UiStatus:
        """Fail before any network call, dropping whatever was in flight."""
        self._supersede()
        return self._fail(message)

    def _fail(self, message: str) -> UiStatus:
        message = sanitize_text(message)
        self.state.fail(message)
        self.presenter.show_error(message)
        self._announce(f"Error: {message}")
        return UiStatus.ERROR

    def _announce(self, message: str) -> None:
        self.presenter.announce(sanitize_text(message))

    def _supersede(self) -> None:
        self._cancel_debounce()
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None

    def _cancel_debounce(self) -> None:
        if self._debounce is not None and not self._debounce.done():
            if self._debounce is not asyncio.current_task():
                self._debounce.cancel()
        self._debounce = None
