"""Application services (use cases) for timetable departures."""

from timetable_departures.application.services.departure_query_service import (
    DEFAULT_DEPARTURE_COUNT,
    DepartureQueryService,
    current_minute,
    flatten,
)
from timetable_departures.application.services.wait_formatter import (
    WaitLabelFormatter,
    format_wait,
)

__all__ = [
    "DEFAULT_DEPARTURE_COUNT",
    "DepartureQueryService",
    "WaitLabelFormatter",
    "current_minute",
    "flatten",
    "format_wait",
]
