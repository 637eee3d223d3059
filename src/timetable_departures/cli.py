"""Command line interface for querying the route timetable."""

import asyncio
import json
import sys
from datetime import date, datetime, time
from typing import Any

from pydantic import ValidationError

from timetable_departures.adapters.config import AppConfig
from timetable_departures.adapters.display import (
    ConsoleDisplayAdapter,
    format_clock,
    render_timetable,
)
from timetable_departures.application.services import DepartureQueryService
from timetable_departures.domain.models import DayType, UpcomingDeparture, UrgencyTier
from timetable_departures.main import configure_logging, load_route_or_exit, run_display


def resolve_query_time(at: str | None, on: str | None, now: datetime) -> datetime:
    """Combine optional --at HH:MM and --date YYYY-MM-DD with the current time.

    Raises:
        ValueError: If either value cannot be parsed.
    """
    query_date = date.fromisoformat(on) if on else now.date()
    if at:
        query_time = time.fromisoformat(at)
    else:
        query_time = now.time()
    return datetime.combine(query_date, query_time)


def upcoming_to_dict(item: UpcomingDeparture) -> dict[str, Any]:
    """Convert an upcoming departure to a JSON-serialisable dict."""
    return {
        "id": item.departure.departure_id,
        "time": format_clock(item.departure.hour, item.departure.minute),
        "absolute_minute": item.departure.absolute_minute,
        "wait_minutes": item.wait_minutes,
        "wait_label": item.wait_label,
        "urgency": UrgencyTier.from_wait_minutes(item.wait_minutes).value,
    }


def show_next(
    config: AppConfig, at: str | None, on: str | None, count: int | None, as_json: bool
) -> None:
    """Print the next departures for the given or current time."""
    # An empty result must only ever mean service has ended
    if count is not None and count < 1:
        print("Error: --count must be at least 1", file=sys.stderr)
        sys.exit(1)

    route = load_route_or_exit(config)
    try:
        query_time = resolve_query_time(at, on, datetime.now())
    except ValueError as e:
        print(f"Error: invalid --at/--date value: {e}", file=sys.stderr)
        sys.exit(1)

    upcoming = DepartureQueryService().next_departures(
        route, query_time, count if count is not None else config.departures_count
    )

    if as_json:
        print(
            json.dumps(
                {
                    "route": route.identifier,
                    "queried_at": query_time.isoformat(timespec="minutes"),
                    "day_type": DayType.classify(query_time).value,
                    "departures": [upcoming_to_dict(item) for item in upcoming],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    print(ConsoleDisplayAdapter(use_color=False).render(route, query_time, upcoming))


def show_timetable(config: AppConfig, day: str | None) -> None:
    """Print the full timetable for a day type (defaults to today's)."""
    route = load_route_or_exit(config)
    day_type = DayType(day) if day else DayType.classify(datetime.now())
    print(render_timetable(route, day_type))


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Upcoming departures from a fixed route timetable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next three departures from now
  timetable-departures next

  # Departures after 08:10 on a given day, as JSON
  timetable-departures next --at 08:10 --date 2024-01-15 --json

  # Full weekend timetable
  timetable-departures timetable --day weekend

  # Live display refreshing every 30 seconds
  timetable-departures watch --interval 30
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Next command
    next_parser = subparsers.add_parser("next", help="Show the next departures")
    next_parser.add_argument("--at", help="Time of day to query from (HH:MM), defaults to now")
    next_parser.add_argument("--date", help="Date to query (YYYY-MM-DD), defaults to today")
    next_parser.add_argument("--count", type=int, help="Number of departures to show")
    next_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Timetable command
    timetable_parser = subparsers.add_parser("timetable", help="Show the full timetable")
    timetable_parser.add_argument(
        "--day",
        choices=[day_type.value for day_type in DayType],
        help="Day type to show, defaults to today's",
    )

    # Watch command
    watch_parser = subparsers.add_parser("watch", help="Live display refreshed on an interval")
    watch_parser.add_argument(
        "--interval", type=int, help="Refresh interval in seconds (5, 10, 30 or 60)"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        if args.command == "watch" and args.interval is not None:
            config = AppConfig(refresh_interval_seconds=args.interval)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)

    if args.command == "next":
        show_next(config, args.at, args.date, args.count, args.json)

    elif args.command == "timetable":
        show_timetable(config, args.day)

    elif args.command == "watch":
        await run_display(config)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
