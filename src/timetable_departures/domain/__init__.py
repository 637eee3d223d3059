"""Domain layer - core business logic and models."""

from timetable_departures.domain.models import (
    DayTimetable,
    DayType,
    Departure,
    Route,
    ScheduleEntry,
    Timetable,
    UpcomingDeparture,
    UrgencyTier,
)
from timetable_departures.domain.ports import DepartureQueryService, DisplayAdapter

__all__ = [
    "DayTimetable",
    "DayType",
    "Departure",
    "DepartureQueryService",
    "DisplayAdapter",
    "Route",
    "ScheduleEntry",
    "Timetable",
    "UpcomingDeparture",
    "UrgencyTier",
]
