"""Formatters for clock times and the wait progress bar."""


def format_clock(hour: int, minute: int) -> str:
    """Format a time of day as zero-padded HH:MM."""
    return f"{hour:02d}:{minute:02d}"


def progress_percent(wait_minutes: int) -> int:
    """Width of the countdown bar: fills up over the last ten minutes, never below 10%."""
    if wait_minutes <= 10:
        return max(10, 100 - wait_minutes * 10)
    return 10


def render_progress_bar(wait_minutes: int, width: int = 20) -> str:
    """Render the countdown bar as text (e.g. '[######--------------]')."""
    filled = round(width * progress_percent(wait_minutes) / 100)
    return f"[{'#' * filled}{'-' * (width - filled)}]"
