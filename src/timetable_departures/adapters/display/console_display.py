"""Console display adapter for upcoming departures."""

import logging
import sys
from datetime import datetime
from typing import TextIO

from timetable_departures.adapters.display.formatters import format_clock, render_progress_bar
from timetable_departures.adapters.display.timetable_view import DAY_TYPE_LABELS
from timetable_departures.adapters.display.urgency_presentation import (
    ANSI_COLORS,
    ANSI_RESET,
    style_for,
)
from timetable_departures.domain.models import DayType, Route, UpcomingDeparture, UrgencyTier
from timetable_departures.domain.ports import DisplayAdapter

logger = logging.getLogger(__name__)

END_OF_SERVICE_MESSAGE = "Service has ended for today"


class ConsoleDisplayAdapter(DisplayAdapter):
    """Renders the next departure and the following ones as plain text."""

    def __init__(self, stream: TextIO | None = None, use_color: bool | None = None) -> None:
        """Initialize the console display.

        Args:
            stream: Output stream. Defaults to stdout.
            use_color: Emit ANSI colors. Defaults to whether the stream is a TTY.
        """
        self.stream = stream or sys.stdout
        if use_color is None:
            use_color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.use_color = use_color

    def render(self, route: Route, now: datetime, upcoming: list[UpcomingDeparture]) -> str:
        """Build the text for one refresh."""
        day_label = DAY_TYPE_LABELS[DayType.classify(now)]
        lines = [
            f"{route.line_label}: {route.origin_label} -> {route.destination_label}",
            f"Now {now.strftime('%H:%M:%S')} ({day_label})",
            "",
        ]

        if not upcoming:
            lines.append(END_OF_SERVICE_MESSAGE)
            return "\n".join(lines)

        next_departure = upcoming[0]
        style = style_for(UrgencyTier.from_wait_minutes(next_departure.wait_minutes))
        highlight = (
            f"Next: {format_clock(next_departure.departure.hour, next_departure.departure.minute)}"
            f"  {next_departure.wait_label}  {style.message}"
        )
        if self.use_color:
            highlight = f"{ANSI_COLORS[style.color]}{highlight}{ANSI_RESET}"
        lines.append(highlight)
        lines.append(render_progress_bar(next_departure.wait_minutes))

        if len(upcoming) > 1:
            lines.append("")
            lines.append("Following:")
            for item in upcoming[1:]:
                lines.append(
                    f"  {format_clock(item.departure.hour, item.departure.minute)}"
                    f"  {item.wait_label}"
                )
        return "\n".join(lines)

    async def display_departures(
        self, route: Route, now: datetime, upcoming: list[UpcomingDeparture]
    ) -> None:
        """Write the rendered departures to the stream."""
        print(self.render(route, now, upcoming), file=self.stream)
        print(file=self.stream)
        self.stream.flush()

    async def start(self) -> None:
        """Start the console display."""
        logger.info("Console display started")

    async def stop(self) -> None:
        """Stop the console display."""
        logger.info("Console display stopped")
