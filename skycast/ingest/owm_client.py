"""OpenWeatherMap client for current conditions and the 3-hourly forecast."""

import logging

import httpx

from skycast.config.schema import WeatherApiConfig
from skycast.ingest.errors import MalformedResponseError, WeatherApiError
from skycast.ingest.parser import parse_current_weather, parse_forecast
from skycast.ingest.request_builder import (
    build_weather_url,
    forecast_params,
    location_params,
)
from skycast.models.common import TemperatureUnit
from skycast.models.weather import ForecastSnapshot, LocationQuery, WeatherSnapshot

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "skycast/1.0.0"


class OpenWeatherClient:
    """One GET per call, no retries; callers decide whether to try again."""

    def __init__(
        self,
        config: WeatherApiConfig,
        http: httpx.AsyncClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.config = config
        self._http = http or httpx.AsyncClient(
            timeout=config.timeout_seconds,
            headers={"User-Agent": user_agent},
        )
        self._owns_http = http is None

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "OpenWeatherClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def fetch_current_weather(
        self, query: LocationQuery, unit: TemperatureUnit
    ) -> WeatherSnapshot:
        url = build_weather_url(
            self.config.base_url,
            self.config.endpoints.current_weather,
            location_params(query, unit),
            self.config.api_key,
        )
        raw = await self._get_json(url)
        return parse_current_weather(raw, unit)

    async def fetch_forecast(
        self, query: LocationQuery, unit: TemperatureUnit
    ) -> ForecastSnapshot:
        url = build_weather_url(
            self.config.base_url,
            self.config.endpoints.forecast,
            forecast_params(query, unit, self.config.forecast_count),
            self.config.api_key,
        )
        raw = await self._get_json(url)
        return parse_forecast(raw, unit)

    async def _get_json(self, url: str) -> object:
        logger.info("GET %s", _redact(url))
        try:
            resp = await self._http.get(url)
        except httpx.RequestError as e:
            logger.error("Weather API request failed: %s", e)
            raise

        if not resp.is_success:
            logger.error(
                "Weather API %d %s for %s",
                resp.status_code, resp.reason_phrase, _redact(url),
            )
            raise WeatherApiError(resp.status_code, resp.reason_phrase)

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"Body is not JSON: {e}") from e


def _redact(url: str) -> str:
    """Hide the credential when logging request URLs."""
    head, sep, _ = url.partition("appid=")
    return f"{head}{sep}***" if sep else url
