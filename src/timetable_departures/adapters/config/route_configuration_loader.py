"""Route configuration loader."""

import logging
from typing import Any

from pydantic import ValidationError

from timetable_departures.adapters.config.app_config import AppConfig
from timetable_departures.domain.models import (
    DayTimetable,
    DayType,
    Route,
    ScheduleEntry,
    Timetable,
)

logger = logging.getLogger(__name__)


class RouteConfigurationLoader:
    """Builds the route and its timetable from app config.

    Malformed timetables fail here, at startup, never during a query.
    """

    @staticmethod
    def load_day_timetable(entries_data: Any, day_type: DayType) -> DayTimetable:
        """Load the entries of one day type from a list of {hour, minutes} tables."""
        if not isinstance(entries_data, list):
            raise ValueError(f"TOML timetable '{day_type.value}' must be a list of entries")

        entries: list[ScheduleEntry] = []
        for index, entry_data in enumerate(entries_data):
            if not isinstance(entry_data, dict):
                raise ValueError(f"{day_type.value} entry #{index + 1} must be a table")
            try:
                entries.append(
                    ScheduleEntry(hour=entry_data.get("hour"), minutes=entry_data.get("minutes"))
                )
            except ValidationError as e:
                raise ValueError(
                    f"Invalid {day_type.value} entry #{index + 1}: {e.errors()[0]['msg']}"
                ) from e

        try:
            return DayTimetable(entries=entries)
        except ValidationError as e:
            raise ValueError(f"Invalid {day_type.value} timetable: {e.errors()[0]['msg']}") from e

    @staticmethod
    def load_from_data(data: dict[str, Any]) -> Route:
        """Build a route from parsed TOML data."""
        route_data = data.get("route")
        if not isinstance(route_data, dict):
            raise ValueError("TOML timetable must have a [route] table")

        for key in ("id", "from", "to", "line"):
            value = route_data.get(key)
            if not isinstance(value, str) or not value:
                raise ValueError(f"[route] '{key}' must be a non-empty string")

        for day_type in DayType:
            if day_type.value not in data:
                raise ValueError(f"TOML timetable is missing [[{day_type.value}]] entries")

        timetable = Timetable(
            weekday=RouteConfigurationLoader.load_day_timetable(
                data[DayType.WEEKDAY.value], DayType.WEEKDAY
            ),
            weekend=RouteConfigurationLoader.load_day_timetable(
                data[DayType.WEEKEND.value], DayType.WEEKEND
            ),
        )

        return Route(
            identifier=route_data["id"],
            origin_label=route_data["from"],
            destination_label=route_data["to"],
            line_label=route_data["line"],
            timetable=timetable,
        )

    @staticmethod
    def load(config: AppConfig) -> Route:
        """Load the route from app config."""
        route = RouteConfigurationLoader.load_from_data(config.load_timetable_data())
        logger.info(
            f"Loaded route '{route.identifier}' ({route.origin_label} -> {route.destination_label}) "
            f"with {len(route.timetable.weekday.entries)} weekday and "
            f"{len(route.timetable.weekend.entries)} weekend hour(s)"
        )
        return route
