"""Human-readable wait labels."""

from timetable_departures.domain.contracts.wait_formatter import WaitFormatterProtocol


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_wait(minutes: int) -> str:
    """Format a wait in minutes (e.g. '45 minutes', '1 hour 30 minutes').

    Zero or negative waits yield an empty string: the departure is due now.
    """
    if minutes <= 0:
        return ""
    if minutes < 60:
        return _plural(minutes, "minute")

    hours = minutes // 60
    remaining_minutes = minutes % 60
    return f"{_plural(hours, 'hour')} {_plural(remaining_minutes, 'minute')}"


class WaitLabelFormatter(WaitFormatterProtocol):
    """Default wait formatter used by the departure query service."""

    def format_wait(self, minutes: int) -> str:
        """Format a wait in minutes."""
        return format_wait(minutes)
