"""Departure domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Departure:
    """A single scheduled departure, derived from a timetable entry."""

    hour: int
    minute: int

    @property
    def absolute_minute(self) -> int:
        """Minutes elapsed since local midnight."""
        return self.hour * 60 + self.minute

    @property
    def departure_id(self) -> str:
        """Key that is unique within one day timetable (e.g. "8-12")."""
        return f"{self.hour}-{self.minute}"


@dataclass(frozen=True)
class UpcomingDeparture:
    """A departure still ahead of the queried time, with its wait."""

    departure: Departure
    wait_minutes: int
    wait_label: str
