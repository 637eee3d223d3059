"""Departure query service port."""

from datetime import datetime
from typing import Protocol

from timetable_departures.domain.models.day_type import DayType
from timetable_departures.domain.models.departure import Departure, UpcomingDeparture
from timetable_departures.domain.models.route import Route


class DepartureQueryService(Protocol):
    """Port for computing upcoming departures from a route's timetable."""

    def next_departures(
        self, route: Route, now: datetime, count: int = 3
    ) -> list[UpcomingDeparture]:
        """Get the next departures strictly after the current minute.

        Args:
            route: Route whose timetable is queried.
            now: Current local time, supplied by the caller.
            count: Maximum number of departures to return.

        Returns:
            Upcoming departures in chronological order; empty once service has ended.
        """
        ...

    def departures_for_day(self, route: Route, day_type: DayType) -> list[Departure]:
        """Get every departure of the route for a day type.

        Args:
            route: Route whose timetable is read.
            day_type: Weekday or weekend timetable.

        Returns:
            All departures of that day in chronological order.
        """
        ...
