"""Day type domain model."""

from datetime import datetime
from enum import Enum

# datetime.weekday(): Monday is 0, Saturday 5, Sunday 6
_WEEKEND_WEEKDAYS = frozenset({5, 6})


class DayType(str, Enum):
    """Which weekly timetable applies to a calendar day."""

    WEEKDAY = "weekday"
    WEEKEND = "weekend"  # Weekends and holidays share one timetable

    @classmethod
    def classify(cls, now: datetime) -> "DayType":
        """Return WEEKEND for Saturday and Sunday, WEEKDAY otherwise."""
        if now.weekday() in _WEEKEND_WEEKDAYS:
            return cls.WEEKEND
        return cls.WEEKDAY
