"""CLI entry point for flight weather checks."""

import argparse
import json
import logging

from flightwx.agent.flight_conditions import (
    build_system_message,
    build_user_message,
    get_weather_forecast,
)
from flightwx.config.loader import get_config_value, load_config, redacted_dump
from flightwx.pipeline.forecast_pipeline import ForecastPipeline
from flightwx.reporting.formatters import format_outcome_json, format_outcome_text

DEFAULT_CONFIG = "flightwx.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flightwx",
        description="Hourly weather checks for small-aircraft flight slots",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Summarize the forecast for a time slot")
    forecast_p.add_argument("time_slot_id", help="Local date-time, e.g. 2025-12-26T07:00:00")
    forecast_p.add_argument("--json", action="store_true", help="Emit JSON")

    # prompt
    prompt_p = sub.add_parser(
        "prompt", help="Show what the reasoning component receives for a slot"
    )
    prompt_p.add_argument("time_slot_id")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. criteria.max_wind_kmh")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "prompt":
        return _cmd_prompt(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_forecast(config, args) -> int:
    outcome = ForecastPipeline(config).run(args.time_slot_id)
    if args.json:
        print(format_outcome_json(outcome))
    else:
        print(format_outcome_text(outcome))
    return 0 if outcome.ok else 1


def _cmd_prompt(config, args) -> int:
    pipeline = ForecastPipeline(config)
    print("--- system ---")
    print(build_system_message(config.criteria))
    print("--- user ---")
    print(build_user_message(args.time_slot_id))
    print("--- tool ---")
    print(get_weather_forecast(pipeline, args.time_slot_id))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    elif args.config_command == "get":
        if args.key.startswith("weather.api_key"):
            print("Error: weather.api_key is not printable")
            return 1
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if hasattr(value, "model_dump"):
            value = value.model_dump(mode="json")
        print(f"{args.key} = {json.dumps(value)}")
        return 0
    else:
        print("Use: config show | config get key")
        return 1
