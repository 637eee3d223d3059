"""Departure query engine: upcoming departures from a static timetable."""

import logging
from datetime import datetime

from timetable_departures.application.services.wait_formatter import WaitLabelFormatter
from timetable_departures.domain.contracts.wait_formatter import WaitFormatterProtocol
from timetable_departures.domain.models import (
    DayTimetable,
    DayType,
    Departure,
    Route,
    UpcomingDeparture,
)

logger = logging.getLogger(__name__)

DEFAULT_DEPARTURE_COUNT = 3


def flatten(day_timetable: DayTimetable) -> list[Departure]:
    """Expand schedule entries into departures in chronological order.

    Entry validation guarantees strictly increasing hours and minutes, so the
    result is ordered by absolute minute without sorting.
    """
    return [
        Departure(hour=entry.hour, minute=minute)
        for entry in day_timetable.entries
        for minute in entry.minutes
    ]


def current_minute(now: datetime) -> int:
    """Minutes since midnight for the given time; seconds are discarded."""
    return now.hour * 60 + now.minute


class DepartureQueryService:
    """Computes upcoming departures for a route at a given time.

    The service never reads a clock: callers pass the current time in, and
    identical arguments always produce identical results.
    """

    def __init__(self, formatter: WaitFormatterProtocol | None = None) -> None:
        """Initialize the service.

        Args:
            formatter: Wait label formatter. Defaults to English labels.
        """
        self._formatter = formatter or WaitLabelFormatter()

    def departures_for_day(self, route: Route, day_type: DayType) -> list[Departure]:
        """Return every departure of the route for a day type."""
        return flatten(route.timetable.for_day_type(day_type))

    def next_departures(
        self, route: Route, now: datetime, count: int = DEFAULT_DEPARTURE_COUNT
    ) -> list[UpcomingDeparture]:
        """Return up to `count` departures strictly after the current minute.

        A departure in the current minute is already gone. An empty list means
        service has ended for the day; departures never roll over into the
        next day's timetable.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")

        day_type = DayType.classify(now)
        now_minute = current_minute(now)
        remaining = [
            departure
            for departure in self.departures_for_day(route, day_type)
            if departure.absolute_minute > now_minute
        ]
        if not remaining:
            logger.debug(f"No departures left for {route.identifier} on {day_type.value}")

        return [
            UpcomingDeparture(
                departure=departure,
                wait_minutes=departure.absolute_minute - now_minute,
                wait_label=self._formatter.format_wait(departure.absolute_minute - now_minute),
            )
            for departure in remaining[:count]
        ]
