"""Timetable domain models."""

from pydantic import BaseModel, ConfigDict, field_validator

from .day_type import DayType
from .schedule_entry import ScheduleEntry


class DayTimetable(BaseModel):
    """Ordered schedule entries for one day type."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[ScheduleEntry, ...] = ()

    @field_validator("entries")
    @classmethod
    def validate_hours_increasing(
        cls, v: tuple[ScheduleEntry, ...]
    ) -> tuple[ScheduleEntry, ...]:
        """Validate hours are strictly increasing, which also rules out duplicate hours."""
        for previous, current in zip(v, v[1:]):
            if current.hour <= previous.hour:
                raise ValueError(
                    f"hours must be strictly increasing, got {current.hour} after {previous.hour}"
                )
        return v


class Timetable(BaseModel):
    """Weekly timetable: one day timetable per day type."""

    model_config = ConfigDict(frozen=True)

    weekday: DayTimetable
    weekend: DayTimetable

    def for_day_type(self, day_type: DayType) -> DayTimetable:
        """Return the day timetable that applies to the given day type."""
        if day_type is DayType.WEEKEND:
            return self.weekend
        return self.weekday
