"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest

from skycast.config.schema import AppConfig, WeatherApiConfig, WidgetConfig
from skycast.storage.database import open_store_db
from skycast.storage.preference_store import PreferenceStore

TEST_BASE_URL = "https://test-owm.example.com/data/2.5"

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class RecordingPresenter:
    """Presenter double that records every call in order."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []
        self.input_value: str | None = None
        self.weather = None
        self.forecast: list = []
        self.theme = None
        self.errors: list[str] = []
        self.announcements: list[str] = []
        self.suggestions: list = []

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def show_loading(self, message):
        self.calls.append(("show_loading", message))

    def show_error(self, message):
        self.errors.append(message)
        self.calls.append(("show_error", message))

    def show_content(self):
        self.calls.append(("show_content", None))

    def show_weather(self, view):
        self.weather = view
        self.calls.append(("show_weather", view))

    def show_forecast(self, cards):
        self.forecast = list(cards)
        self.calls.append(("show_forecast", cards))

    def set_theme(self, theme):
        self.theme = theme
        self.calls.append(("set_theme", theme))

    def set_unit(self, unit):
        self.calls.append(("set_unit", unit))

    def set_input(self, value):
        self.input_value = value
        self.calls.append(("set_input", value))

    def show_suggestions(self, cities):
        self.suggestions = list(cities)
        self.calls.append(("show_suggestions", cities))

    def hide_suggestions(self):
        self.suggestions = []
        self.calls.append(("hide_suggestions", None))

    def announce(self, message):
        self.announcements.append(message)
        self.calls.append(("announce", message))


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def config() -> WidgetConfig:
    return WidgetConfig(
        weather_api=WeatherApiConfig(api_key="test-key", base_url=TEST_BASE_URL),
        app=AppConfig(debounce_seconds=0.01),
    )


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = open_store_db(tmp_path / "test.db")
    yield conn
    conn.close()


@pytest.fixture
def store(db: sqlite3.Connection) -> PreferenceStore:
    return PreferenceStore(db, cache_duration_minutes=30)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def current_body() -> dict:
    return load_fixture("owm_current_london.json")


@pytest.fixture
def forecast_body() -> dict:
    return load_fixture("owm_forecast_london.json")
