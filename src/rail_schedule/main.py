"""Main entry point for the railway management application."""

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from rail_schedule.adapters.config import AppConfig, NetworkConfigurationLoader
from rail_schedule.adapters.formatters import TextReportFormatter
from rail_schedule.application.services import RailwayService
from rail_schedule.cli import RailwayMenu
from rail_schedule.domain.models.railway_system import RailwaySystem

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_service(config: AppConfig) -> RailwayService:
    """Create the service and apply the seed file, if one is configured.

    Raises:
        FileNotFoundError: If the configured seed file does not exist.
        ValueError: If the seed file is malformed or one of its steps is rejected.
    """
    station_configs = NetworkConfigurationLoader.load(config) if config.config_file else []

    # Seed [rules] must be applied before the system is created
    service = RailwayService(RailwaySystem(config.separation_rules()))
    if not station_configs:
        return service

    results = service.load_network(station_configs)
    errors = [result.error for result in results if result.error is not None]
    if errors:
        for error in errors:
            logger.error(f"Seed step rejected ({error.kind.value}): {error.reason}")
        raise ValueError(f"{len(errors)} seed step(s) failed in {config.config_file}")
    logger.info(f"Loaded {len(station_configs)} station(s) from {config.config_file}")
    return service


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Railway station and train schedule manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with an empty network
  rail-schedule

  # Start from a seed file
  rail-schedule --config network.toml
        """,
    )
    parser.add_argument("--config", help="TOML file describing the initial network")
    parser.add_argument("--log-level", help="Log level (e.g. DEBUG, INFO, WARNING)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu and return the process exit code."""
    args = parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.config:
        overrides["config_file"] = args.config
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        config = AppConfig(**overrides)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)

    try:
        service = build_service(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load network configuration: {e}")
        return 1

    menu = RailwayMenu(service, TextReportFormatter())
    try:
        menu.run()
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Synchronous entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
