"""Domain models for timetable departures."""

from timetable_departures.domain.models.day_type import DayType
from timetable_departures.domain.models.departure import Departure, UpcomingDeparture
from timetable_departures.domain.models.route import Route
from timetable_departures.domain.models.schedule_entry import ScheduleEntry
from timetable_departures.domain.models.timetable import DayTimetable, Timetable
from timetable_departures.domain.models.urgency_tier import UrgencyTier

__all__ = [
    "DayTimetable",
    "DayType",
    "Departure",
    "Route",
    "ScheduleEntry",
    "Timetable",
    "UpcomingDeparture",
    "UrgencyTier",
]
