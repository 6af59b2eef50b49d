"""Tests for config loading, env fallback and lookups."""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from skycast.config.defaults import suggest_cities
from skycast.config.loader import get_config_value, load_config, redacted_json
from skycast.config.schema import WidgetConfig
from skycast.models.common import TemperatureUnit


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        config = load_config(tmp_path / "nope.yaml")
        assert config.app.default_city == "Accra"
        assert config.app.cache_duration_minutes == 30
        assert config.weather_api.forecast_count == 5
        assert config.weather_api.api_key == ""

    def test_empty_yaml_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.app.default_unit == TemperatureUnit.METRIC
        assert config.weather_api.endpoints.current_weather == "/weather"

    def test_values_from_yaml(self, tmp_path: Path):
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump(
                {
                    "weather_api": {"api_key": "abc123"},
                    "app": {"default_city": "Paris", "default_unit": "imperial"},
                },
                f,
            )
        config = load_config(path)
        assert config.weather_api.api_key == "abc123"
        assert config.app.default_city == "Paris"
        assert config.app.default_unit == TemperatureUnit.IMPERIAL

    def test_api_key_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
        path = tmp_path / "c.yaml"
        path.write_text("weather_api:\n  api_key: ''\n")
        config = load_config(path)
        assert config.weather_api.api_key == "from-env"

    def test_yaml_key_wins_over_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
        path = tmp_path / "c.yaml"
        path.write_text("weather_api:\n  api_key: from-file\n")
        assert load_config(path).weather_api.api_key == "from-file"

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("app:\n  colour: blue\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_forecast_count_capped_at_free_tier(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("weather_api:\n  forecast_count: 40\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_non_mapping_section_is_validation_error(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
        path = tmp_path / "bad.yaml"
        path.write_text("weather_api: just-a-string\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_null_section_uses_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        path = tmp_path / "c.yaml"
        path.write_text("weather_api:\n")
        assert load_config(path).weather_api.forecast_count == 5


class TestConfigLookups:
    def test_dotted_key(self):
        assert get_config_value(WidgetConfig(), "app.default_city") == "Accra"

    def test_invalid_key(self):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(WidgetConfig(), "app.nonexistent")

    def test_redacted_json_masks_key(self):
        config = WidgetConfig.model_validate({"weather_api": {"api_key": "secret-key-123"}})
        shown = json.loads(redacted_json(config))
        assert shown["weather_api"]["api_key"] == "secr..."
        assert "secret-key-123" not in redacted_json(config)


class TestSuggestions:
    def test_substring_match(self):
        names = [c.name for c in suggest_cities("on")]
        assert names == ["London", "Toronto"]

    def test_case_insensitive(self):
        assert [c.name for c in suggest_cities("PAR")] == ["Paris"]

    def test_short_input_has_no_suggestions(self):
        assert suggest_cities("l") == []

    def test_limit(self):
        assert [c.name for c in suggest_cities("on", limit=1)] == ["London"]

    def test_whitespace_only(self):
        assert suggest_cities("   ") == []
