"""Main entry point: live upcoming-departures display in the terminal."""

import asyncio
import logging
import sys
from datetime import datetime

from pydantic import ValidationError

from timetable_departures.adapters.config import AppConfig, RouteConfigurationLoader
from timetable_departures.adapters.display import ConsoleDisplayAdapter, render_timetable
from timetable_departures.adapters.pollers import ClockPoller
from timetable_departures.application.services import DepartureQueryService
from timetable_departures.domain.models import DayType, Route

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_route_or_exit(config: AppConfig) -> Route:
    """Load the configured route, exiting with status 1 if the timetable is invalid."""
    try:
        return RouteConfigurationLoader.load(config)
    except OSError as e:
        logger.error(f"Cannot read timetable file: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid timetable configuration: {e}")
        sys.exit(1)


async def run_display(config: AppConfig) -> None:
    """Refresh the console display until interrupted."""
    route = load_route_or_exit(config)
    query_service = DepartureQueryService()
    display_adapter = ConsoleDisplayAdapter()

    if config.show_timetable:
        print(render_timetable(route, DayType.classify(datetime.now())))
        print()

    poller = ClockPoller(query_service, route, config, display_adapter)
    await display_adapter.start()
    await poller.start()
    try:
        await poller.wait()
    finally:
        await poller.stop()
        await display_adapter.stop()


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    configure_logging(config.log_level)
    await run_display(config)


def run() -> None:
    """Synchronous entry point for the display command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
