"""CLI entry point for the weather widget."""

import argparse
import asyncio
import json
import logging

from pydantic import BaseModel

from skycast.config.defaults import suggest_cities
from skycast.config.loader import (
    get_config_value,
    load_config,
    redacted,
    redacted_json,
)
from skycast.config.schema import WidgetConfig
from skycast.ingest.geolocation import StaticLocator
from skycast.ingest.owm_client import OpenWeatherClient
from skycast.models.common import TemperatureUnit
from skycast.models.state import UiStatus
from skycast.orchestrator import Orchestrator
from skycast.render.terminal import TerminalPresenter
from skycast.storage.database import open_store_db
from skycast.storage.preference_store import PreferenceStore

DEFAULT_CONFIG = "config/skycast.yaml"
DEFAULT_DB = "data/skycast.db"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Current weather and a 5-day forecast in your terminal",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="Preferences SQLite path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests and state changes"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Show weather for a city")
    show_p.add_argument(
        "city", nargs="?", help="City name (default: last search or configured city)"
    )

    # locate
    locate_p = sub.add_parser("locate", help="Show weather for a position")
    locate_p.add_argument("--lat", type=float, help="Latitude")
    locate_p.add_argument("--lon", type=float, help="Longitude")

    # unit
    unit_p = sub.add_parser("unit", help="Set the preferred unit system")
    unit_p.add_argument("unit", choices=[u.value for u in TemperatureUnit])

    # suggest
    suggest_p = sub.add_parser("suggest", help="List popular cities matching text")
    suggest_p.add_argument("text")

    # prefs show / prefs clear
    prefs_p = sub.add_parser("prefs", help="Saved preference operations")
    prefs_sub = prefs_p.add_subparsers(dest="prefs_command")
    prefs_sub.add_parser("show", help="Display saved preferences")
    prefs_sub.add_parser("clear", help="Forget saved preferences")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. app.default_city")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)
    logging.basicConfig(
        level=logging.INFO if args.verbose else config.app.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "show":
        return asyncio.run(_cmd_show(config, args))
    elif args.command == "locate":
        return asyncio.run(_cmd_locate(config, args))
    elif args.command == "unit":
        return _cmd_unit(config, args)
    elif args.command == "suggest":
        return _cmd_suggest(args)
    elif args.command == "prefs":
        return _cmd_prefs(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _open_store(config: WidgetConfig, db_path: str) -> PreferenceStore:
    conn = open_store_db(db_path)
    return PreferenceStore(conn, config.app.cache_duration_minutes)


async def _cmd_show(config: WidgetConfig, args) -> int:
    if not config.weather_api.api_key:
        print("WARNING: no API key configured (set OPENWEATHER_API_KEY)")
    store = _open_store(config, args.db)
    try:
        async with OpenWeatherClient(config.weather_api) as client:
            orchestrator = Orchestrator(config, client, store, TerminalPresenter())
            status = await orchestrator.start(args.city)
    finally:
        store.conn.close()
    return 0 if status == UiStatus.SUCCESS else 1


async def _cmd_locate(config: WidgetConfig, args) -> int:
    lat = args.lat if args.lat is not None else config.location.latitude
    lon = args.lon if args.lon is not None else config.location.longitude
    store = _open_store(config, args.db)
    try:
        async with OpenWeatherClient(config.weather_api) as client:
            orchestrator = Orchestrator(
                config, client, store, TerminalPresenter(), StaticLocator(lat, lon)
            )
            orchestrator.load_preferences()
            status = await orchestrator.locate()
    finally:
        store.conn.close()
    return 0 if status == UiStatus.SUCCESS else 1


def _cmd_unit(config: WidgetConfig, args) -> int:
    store = _open_store(config, args.db)
    record = store.load()
    last_search = record.last_search if record else None
    store.save(TemperatureUnit(args.unit), last_search)
    store.conn.close()
    print(f"Unit: {args.unit}")
    return 0


def _cmd_suggest(args) -> int:
    matches = suggest_cities(args.text)
    if not matches:
        print("No suggestions")
        return 1
    for city in matches:
        print(f"{city.name} ({city.country})")
    return 0


def _cmd_prefs(config: WidgetConfig, args) -> int:
    store = _open_store(config, args.db)
    try:
        if args.prefs_command == "show":
            record = store.load()
            if record is None:
                print("No saved preferences")
            else:
                print(json.dumps(json.loads(record.to_json()), indent=2))
            return 0
        elif args.prefs_command == "clear":
            store.clear()
            print("Preferences cleared")
            return 0
        else:
            print("Use: prefs show | prefs clear")
            return 1
    finally:
        store.conn.close()


def _cmd_config(config: WidgetConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_json(config))
        return 0
    elif args.config_command == "get":
        if args.key.startswith("weather_api.api_key"):
            print("Error: the API key is not printed")
            return 1
        try:
            value = get_config_value(redacted(config), args.key)
        except (KeyError, AttributeError) as e:
            print(f"Error: {e}")
            return 1
        if isinstance(value, BaseModel):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Use: config show | config get key")
    return 1
