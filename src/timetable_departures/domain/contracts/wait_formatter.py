"""Protocol for formatting wait durations."""

from typing import Protocol


class WaitFormatterProtocol(Protocol):
    """Protocol for turning a wait in minutes into a human-readable label."""

    def format_wait(self, minutes: int) -> str:
        """Format a wait duration.

        Args:
            minutes: Whole minutes until the departure.

        Returns:
            Label like "45 minutes" or "1 hour 30 minutes", or "" when nothing is left to wait.
        """
        ...
