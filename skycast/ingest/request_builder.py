"""Query URL construction for the OpenWeatherMap REST API."""

from typing import Any
from urllib.parse import quote

from skycast.models.common import TemperatureUnit
from skycast.models.weather import Coordinates, LocationQuery

# Marks left literal in query components, besides letters, digits and "-_.".
_UNRESERVED = "!~*'()"


def build_weather_url(
    base_url: str, endpoint: str, params: dict[str, Any], api_key: str
) -> str:
    """Concatenate base URL, endpoint and a percent-encoded query string.

    Parameters keep their insertion order; the ``appid`` credential is
    appended last.
    """
    query = {**params, "appid": api_key}
    pairs = [
        f"{quote(str(k), safe=_UNRESERVED)}={quote(str(v), safe=_UNRESERVED)}"
        for k, v in query.items()
    ]
    return f"{base_url.rstrip('/')}{endpoint}?{'&'.join(pairs)}"


def location_params(query: LocationQuery, unit: TemperatureUnit) -> dict[str, Any]:
    """Either ``q`` (city name) or ``lat``/``lon``, plus the unit system."""
    if isinstance(query, Coordinates):
        return {"lat": query.lat, "lon": query.lon, "units": unit.value}
    return {"q": query, "units": unit.value}


def forecast_params(
    query: LocationQuery, unit: TemperatureUnit, count: int
) -> dict[str, Any]:
    params = location_params(query, unit)
    params["cnt"] = count
    return params
