"""CLI entry point for the BBC Weather scraper."""

import argparse
import logging

from bbcweather.config.defaults import DEFAULT_CITIES
from bbcweather.config.loader import get_config_value, load_config
from bbcweather.config.schema import AppConfig
from bbcweather.ingest.bbc_client import BbcWeatherClient
from bbcweather.ingest.page_fetcher import PageFetcher
from bbcweather.pipeline.report_pipeline import report_many


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bbcweather",
        description="BBC Weather forecast scraper",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # report
    report_p = sub.add_parser("report", help="Fetch and print city reports")
    report_p.add_argument("cities", nargs="*", help="City ids from the catalog")
    report_p.add_argument(
        "--all", action="store_true", help="Report every catalog city"
    )
    report_p.add_argument(
        "--json", action="store_true", help="Print full reports as JSON"
    )

    # cities
    sub.add_parser("cities", help="List catalog cities")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. scraper.base_url")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.ops.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "report":
        return _cmd_report(config, args)
    elif args.command == "cities":
        return _cmd_cities()
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_report(config: AppConfig, args) -> int:
    city_ids = [c.id for c in DEFAULT_CITIES] if args.all else args.cities
    if not city_ids:
        print("Error: name at least one city or pass --all")
        return 1

    client = BbcWeatherClient(
        base_url=config.scraper.base_url,
        user_agent=config.scraper.user_agent,
        timeout=config.scraper.timeout,
    )
    result = report_many(city_ids, PageFetcher(client), as_json=args.json)

    for rendered in result.reports.values():
        print(rendered)
        print()
    for city_id, error in result.errors.items():
        print(f"{city_id}: {type(error).__name__}: {error}")
    return 0 if result.ok else 1


def _cmd_cities() -> int:
    for c in DEFAULT_CITIES:
        print(f"{c.id.value:<10} {c.location_code:<8} {c.name}")
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    print("Use: config show | config get key")
    return 1
