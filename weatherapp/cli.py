"""CLI entry point for the weather lookup app."""

import argparse
import asyncio
import logging

from weatherapp.client.open_meteo import OpenMeteoClient
from weatherapp.config.loader import (
    config_hash,
    get_config_value,
    load_config,
    set_config_value,
)
from weatherapp.config.schema import AppConfig
from weatherapp.display.orchestrator import WeatherDisplayOrchestrator
from weatherapp.models.location import Coordinates
from weatherapp.ports import FixedGeolocation, GeolocationProvider
from weatherapp.reporting.formatters import (
    format_current_card,
    format_forecast,
    format_suggestions,
)
from weatherapp.search.controller import LocationSearchController

DEFAULT_CONFIG = "weatherapp.yaml"


def build_session(
    config: AppConfig,
    geolocation: GeolocationProvider | None = None,
) -> tuple[WeatherDisplayOrchestrator, LocationSearchController]:
    """Wire a client, orchestrator and search controller together."""
    assert config.seed_location is not None
    client = OpenMeteoClient.from_config(config.api)
    orchestrator = WeatherDisplayOrchestrator(client, config.seed_location.to_location())
    search = LocationSearchController(
        client,
        on_select=orchestrator.select_location,
        geolocation=geolocation,
    )
    search.sync_current_location(orchestrator.current_location)
    return orchestrator, search


def apply_overrides(config: AppConfig, overrides: list[str]) -> AppConfig:
    """Apply KEY=VALUE overrides in order; each result is re-validated."""
    for item in overrides:
        if "=" not in item:
            raise ValueError(f"use key=value format: {item!r}")
        key, value = item.split("=", 1)
        config = set_config_value(config, key.strip(), value.strip())
    return config


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Current conditions and 7-day forecast from Open-Meteo",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value for this run, e.g. api.timeout_seconds=5",
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Show weather for the seed or a searched location")
    show_p.add_argument("--location", help="Search text; the first match is used")

    # search
    search_p = sub.add_parser("search", help="List location suggestions")
    search_p.add_argument("query", help="City name to look up")

    # here
    here_p = sub.add_parser("here", help="Show weather for a device position")
    here_p.add_argument("--lat", type=float, required=True)
    here_p.add_argument("--lon", type=float, required=True)

    # config show / get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = apply_overrides(load_config(args.config), args.overrides)
    except (KeyError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=config.logging.level.value,
        format=config.logging.format,
    )

    if args.command == "show":
        return asyncio.run(_cmd_show(config, args))
    elif args.command == "search":
        return asyncio.run(_cmd_search(config, args))
    elif args.command == "here":
        return asyncio.run(_cmd_here(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_show(config: AppConfig, args) -> int:
    orchestrator, search = build_session(config)
    if args.location:
        await search.on_query_changed(args.location)
        if search.search_error:
            print(f"Error: {search.search_error}")
            return 1
        if not search.suggestions:
            print(f"No locations found for {args.location!r}")
            return 1
        await search.on_location_picked(search.suggestions[0])
    else:
        await orchestrator.start()
    return _print_weather(orchestrator)


async def _cmd_search(config: AppConfig, args) -> int:
    _, search = build_session(config)
    await search.on_query_changed(args.query)
    if search.search_error:
        print(f"Error: {search.search_error}")
        return 1
    if not search.suggestions:
        print("No matches")
        return 0
    print(format_suggestions(search.suggestions))
    return 0


async def _cmd_here(config: AppConfig, args) -> int:
    geolocation = FixedGeolocation(Coordinates(args.lat, args.lon))
    orchestrator, search = build_session(config, geolocation=geolocation)
    await search.on_current_location_requested()
    if search.search_error:
        print(f"Error: {search.search_error}")
        return 1
    return _print_weather(orchestrator)


def _print_weather(orchestrator: WeatherDisplayOrchestrator) -> int:
    if orchestrator.error:
        print(f"Error: {orchestrator.error}")
        return 1
    print(format_current_card(orchestrator))
    forecast = format_forecast(orchestrator)
    if forecast:
        print(forecast)
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(f"# config {config_hash(config)}")
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1
