"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skycast.models.common import TemperatureUnit


class EndpointsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    current_weather: str = "/weather"
    forecast: str = "/forecast"


class WeatherApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = "https://api.openweathermap.org/data/2.5"
    endpoints: EndpointsConfig = EndpointsConfig()
    forecast_count: int = Field(default=5, ge=1, le=5)  # free tier cap
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "Weather App"
    version: str = "1.0.0"
    default_city: str = "Accra"
    default_unit: TemperatureUnit = TemperatureUnit.METRIC
    cache_duration_minutes: float = Field(default=30.0, gt=0.0)
    debounce_seconds: float = Field(default=1.0, ge=0.0)
    min_autosearch_chars: int = Field(default=2, ge=0)
    geolocation_timeout_seconds: float = Field(default=10.0, gt=0.0)
    log_level: str = "WARNING"


class MessagesConfig(BaseModel):
    model_config = {"extra": "forbid"}

    unknown_error: str = "Something went wrong. Please try again."
    network_error: str = "Network error. Please check your internet connection."
    timeout_error: str = "Request timed out. Please try again."
    city_not_found: str = "City not found. Please check the spelling and try again."
    api_limit: str = "API rate limit exceeded. Please wait a moment and try again."
    invalid_api_key: str = "Invalid API key. Please check your configuration."
    location_error: str = "Unable to get your location."
    location_denied: str = (
        "Location access denied. Please allow location access "
        "or search for a city manually."
    )
    location_unavailable: str = "Location information is unavailable"
    location_timeout: str = "Location request timed out"
    location_unsupported: str = "Geolocation is not supported on this device"
    invalid_coordinates: str = "Invalid coordinates received. Please try again."
    empty_search: str = "Please enter a city name to search."
    invalid_input: str = (
        "Please enter a valid city name "
        "(letters, spaces, and common punctuation only)"
    )


class LocationConfig(BaseModel):
    """Fixed coordinates served to the locate command when none are given."""

    model_config = {"extra": "forbid"}

    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)


class WidgetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather_api: WeatherApiConfig = WeatherApiConfig()
    app: AppConfig = AppConfig()
    messages: MessagesConfig = MessagesConfig()
    location: LocationConfig = LocationConfig()
