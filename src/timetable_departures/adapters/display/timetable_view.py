"""Full-day timetable rendering."""

from timetable_departures.domain.models import DayType, Route

DAY_TYPE_LABELS: dict[DayType, str] = {
    DayType.WEEKDAY: "Weekdays",
    DayType.WEEKEND: "Weekends & holidays",
}


def render_timetable(route: Route, day_type: DayType) -> str:
    """Render every departure of a day type, one line per hour."""
    lines = [
        f"{route.line_label}: {route.origin_label} -> {route.destination_label}",
        f"Timetable ({DAY_TYPE_LABELS[day_type]})",
        "",
    ]
    for entry in route.timetable.for_day_type(day_type).entries:
        minutes = " ".join(f"{minute:02d}" for minute in entry.minutes)
        lines.append(f"{entry.hour:>2}h | {minutes}")
    return "\n".join(lines)
