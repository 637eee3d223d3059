"""Display adapter port."""

from abc import ABC, abstractmethod
from datetime import datetime

from timetable_departures.domain.models.departure import UpcomingDeparture
from timetable_departures.domain.models.route import Route


class DisplayAdapter(ABC):
    """Port for showing upcoming departures to users."""

    @abstractmethod
    async def display_departures(
        self, route: Route, now: datetime, upcoming: list[UpcomingDeparture]
    ) -> None:
        """Display upcoming departures. An empty list means service has ended for the day."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
