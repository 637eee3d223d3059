"""Shared fixtures for timetable departure tests."""

import pytest

from timetable_departures.domain.models import (
    DayTimetable,
    Route,
    ScheduleEntry,
    Timetable,
)


@pytest.fixture
def weekday_timetable() -> DayTimetable:
    """Weekday timetable with a dense morning and service ending at 23:30."""
    return DayTimetable(
        entries=(
            ScheduleEntry(hour=5, minutes=(30, 45)),
            ScheduleEntry(hour=8, minutes=(0, 12, 24, 36, 48)),
            ScheduleEntry(hour=12, minutes=(0, 20, 40)),
            ScheduleEntry(hour=23, minutes=(0, 15, 30)),
        )
    )


@pytest.fixture
def weekend_timetable() -> DayTimetable:
    """Weekend timetable running every 20 minutes from 6 to 7 o'clock."""
    return DayTimetable(
        entries=(
            ScheduleEntry(hour=6, minutes=(0, 20, 40)),
            ScheduleEntry(hour=7, minutes=(0, 20)),
        )
    )


@pytest.fixture
def route(weekday_timetable: DayTimetable, weekend_timetable: DayTimetable) -> Route:
    """Route with the sample weekday and weekend timetables."""
    return Route(
        identifier="yakushido-sendai",
        origin_label="Yakushido",
        destination_label="Sendai",
        line_label="Sendai Subway Tozai Line",
        timetable=Timetable(weekday=weekday_timetable, weekend=weekend_timetable),
    )
