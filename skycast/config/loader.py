"""YAML config loader with environment fallback for the API key."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from skycast.config.schema import WidgetConfig

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENWEATHER_API_KEY"


def load_config(path: str | Path) -> WidgetConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. An empty ``weather_api.api_key`` is
    filled from the OPENWEATHER_API_KEY environment variable.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    else:
        logger.info("Config %s not found, using defaults", path)

    if isinstance(raw, dict):
        if raw.get("weather_api") is None:
            raw["weather_api"] = {}
        api = raw["weather_api"]
        if isinstance(api, dict) and not api.get("api_key"):
            env_key = os.environ.get(API_KEY_ENV, "")
            if env_key:
                raw["weather_api"] = {**api, "api_key": env_key}

    # Malformed sections are left for pydantic to report.
    return WidgetConfig.model_validate(raw)


def get_config_value(config: WidgetConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'app.default_city'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: WidgetConfig) -> WidgetConfig:
    """Copy of the config with the API key masked, for display."""
    key = config.weather_api.api_key
    masked = f"{key[:4]}..." if key else ""
    return config.model_copy(
        update={"weather_api": config.weather_api.model_copy(update={"api_key": masked})}
    )


def redacted_json(config: WidgetConfig) -> str:
    return redacted(config).model_dump_json(indent=2)
