"""Display adapters: the presentation boundary for upcoming departures."""

from timetable_departures.adapters.display.console_display import (
    END_OF_SERVICE_MESSAGE,
    ConsoleDisplayAdapter,
)
from timetable_departures.adapters.display.formatters import (
    format_clock,
    progress_percent,
    render_progress_bar,
)
from timetable_departures.adapters.display.timetable_view import render_timetable
from timetable_departures.adapters.display.urgency_presentation import (
    URGENCY_PRESENTATION,
    UrgencyStyle,
    style_for,
)

__all__ = [
    "END_OF_SERVICE_MESSAGE",
    "URGENCY_PRESENTATION",
    "ConsoleDisplayAdapter",
    "UrgencyStyle",
    "format_clock",
    "progress_percent",
    "render_progress_bar",
    "render_timetable",
    "style_for",
]
