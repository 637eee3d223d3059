"""Tests for the departure query service."""

from datetime import datetime

import pytest

from timetable_departures.application.services import (
    DepartureQueryService,
    current_minute,
    flatten,
)
from timetable_departures.domain.models import (
    DayTimetable,
    DayType,
    Departure,
    Route,
    ScheduleEntry,
    Timetable,
)

# 2024-01-15 is a Monday, 2024-01-13 a Saturday
WEEKDAY = (2024, 1, 15)
SATURDAY = (2024, 1, 13)


class FixedLabelFormatter:
    """Formatter returning a recognisable label for testing."""

    def format_wait(self, minutes: int) -> str:
        """Return the wait in a fixed test format."""
        return f"in {minutes}"


def test_flatten_preserves_entry_and_minute_order(weekday_timetable: DayTimetable) -> None:
    """Given a day timetable, when flattening, then departures follow entry and minute order."""
    departures = flatten(weekday_timetable)

    assert departures[:3] == [
        Departure(hour=5, minute=30),
        Departure(hour=5, minute=45),
        Departure(hour=8, minute=0),
    ]
    assert len(departures) == 13


def test_flatten_is_strictly_increasing(route: Route) -> None:
    """Given valid timetables, when flattening, then absolute minutes strictly increase."""
    for day_type in DayType:
        minutes = [
            d.absolute_minute for d in flatten(route.timetable.for_day_type(day_type))
        ]
        assert all(a < b for a, b in zip(minutes, minutes[1:]))


def test_flatten_empty_day() -> None:
    """Given a day without entries, when flattening, then no departures are returned."""
    assert flatten(DayTimetable()) == []


def test_current_minute_discards_seconds() -> None:
    """Given a time with seconds, when computing current minute, then seconds are dropped."""
    assert current_minute(datetime(*WEEKDAY, 7, 59, 59, 999999)) == 7 * 60 + 59


def test_next_departure_after_current_minute(route: Route) -> None:
    """Given 08:10 on a weekday, when querying, then 08:12 is next with a 2 minute wait."""
    service = DepartureQueryService()

    result = service.next_departures(route, datetime(*WEEKDAY, 8, 10), count=3)

    assert [(r.departure.hour, r.departure.minute) for r in result] == [
        (8, 12),
        (8, 24),
        (8, 36),
    ]
    assert result[0].wait_minutes == 2
    assert result[0].wait_label == "2 minutes"


def test_departure_in_current_minute_is_already_gone(route: Route) -> None:
    """Given now is exactly 08:12, when querying, then the 08:12 departure is excluded."""
    service = DepartureQueryService()

    result = service.next_departures(route, datetime(*WEEKDAY, 8, 12, 0), count=1)

    assert result[0].departure == Departure(hour=8, minute=24)
    assert result[0].wait_minutes == 12


def test_sub_minute_seconds_do_not_hide_next_departure(route: Route) -> None:
    """Given 07:59:59 and a departure at 08:00, when querying, then 08:00 is included."""
    service = DepartureQueryService()

    result = service.next_departures(route, datetime(*WEEKDAY, 7, 59, 59), count=1)

    assert result[0].departure == Departure(hour=8, minute=0)
    assert result[0].wait_minutes == 1


def test_service_ended_returns_empty(route: Route) -> None:
    """Given 23:45 after the last 23:30 departure, when querying, then the result is empty."""
    service = DepartureQueryService()

    assert service.next_departures(route, datetime(*WEEKDAY, 23, 45), count=3) == []


def test_no_rollover_into_next_day(route: Route) -> None:
    """Given late Friday night, when querying, then Saturday's early departures are not used."""
    service = DepartureQueryService()

    assert service.next_departures(route, datetime(2024, 1, 19, 23, 59), count=3) == []


def test_weekend_uses_weekend_timetable(route: Route) -> None:
    """Given a Saturday morning, when querying, then weekend departures are returned."""
    service = DepartureQueryService()

    result = service.next_departures(route, datetime(*SATURDAY, 5, 50), count=2)

    assert [r.departure for r in result] == [
        Departure(hour=6, minute=0),
        Departure(hour=6, minute=20),
    ]
    assert [r.wait_minutes for r in result] == [10, 30]


@pytest.mark.parametrize(
    ("hour", "minute", "count", "expected_length"),
    [
        (0, 0, 3, 3),
        (12, 30, 3, 3),
        (23, 10, 3, 2),
        (23, 20, 5, 1),
        (0, 0, 100, 13),
        (0, 0, 0, 0),
    ],
)
def test_result_length_is_min_of_count_and_remaining(
    route: Route, hour: int, minute: int, count: int, expected_length: int
) -> None:
    """Given a count, when querying, then at most that many remaining departures are returned."""
    service = DepartureQueryService()

    result = service.next_departures(route, datetime(*WEEKDAY, hour, minute), count=count)

    assert len(result) == expected_length


def test_every_result_is_strictly_in_the_future(route: Route) -> None:
    """Given any time of day, when querying, then all departures are after the current minute."""
    service = DepartureQueryService()

    for hour in range(24):
        for minute in range(0, 60, 7):
            now = datetime(*WEEKDAY, hour, minute, 30)
            for item in service.next_departures(route, now, count=20):
                assert item.departure.absolute_minute > hour * 60 + minute
                assert item.wait_minutes == item.departure.absolute_minute - (hour * 60 + minute)


def test_default_count_is_three(route: Route) -> None:
    """Given no count, when querying early in the day, then three departures are returned."""
    service = DepartureQueryService()

    assert len(service.next_departures(route, datetime(*WEEKDAY, 4, 0))) == 3


def test_negative_count_is_rejected(route: Route) -> None:
    """Given a negative count, when querying, then raises ValueError."""
    service = DepartureQueryService()

    with pytest.raises(ValueError, match="count must not be negative"):
        service.next_departures(route, datetime(*WEEKDAY, 8, 0), count=-1)


def test_query_is_idempotent(route: Route) -> None:
    """Given identical arguments, when querying twice, then the results are equal."""
    service = DepartureQueryService()
    now = datetime(*WEEKDAY, 8, 10, 42)

    assert service.next_departures(route, now, 3) == service.next_departures(route, now, 3)


def test_long_wait_uses_hours_label(route: Route) -> None:
    """Given a wait over an hour, when querying, then the label includes hours."""
    service = DepartureQueryService()

    result = service.next_departures(route, datetime(*WEEKDAY, 9, 0), count=1)

    assert result[0].departure == Departure(hour=12, minute=0)
    assert result[0].wait_minutes == 180
    assert result[0].wait_label == "3 hours 0 minutes"


def test_custom_formatter_is_used(route: Route) -> None:
    """Given a custom wait formatter, when querying, then its labels are used."""
    service = DepartureQueryService(formatter=FixedLabelFormatter())

    result = service.next_departures(route, datetime(*WEEKDAY, 8, 10), count=1)

    assert result[0].wait_label == "in 2"


def test_departures_for_day_returns_whole_day(route: Route) -> None:
    """Given a day type, when listing departures for the day, then all of them are returned."""
    service = DepartureQueryService()

    departures = service.departures_for_day(route, DayType.WEEKEND)

    assert [d.departure_id for d in departures] == ["6-0", "6-20", "6-40", "7-0", "7-20"]


def test_empty_weekday_timetable_never_has_departures() -> None:
    """Given a route with no weekday service, when querying on a weekday, then result is empty."""
    route = Route(
        identifier="weekend-only",
        origin_label="A",
        destination_label="B",
        line_label="Shuttle",
        timetable=Timetable(
            weekday=DayTimetable(),
            weekend=DayTimetable(entries=(ScheduleEntry(hour=10, minutes=(0,)),)),
        ),
    )
    service = DepartureQueryService()

    assert service.next_departures(route, datetime(*WEEKDAY, 0, 0)) == []
