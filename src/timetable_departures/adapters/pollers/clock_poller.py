"""Clock poller that refreshes upcoming departures on a fixed cadence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timetable_departures.adapters.config.app_config import AppConfig
    from timetable_departures.domain.models import Route
    from timetable_departures.domain.ports import DepartureQueryService, DisplayAdapter

logger = logging.getLogger(__name__)


class ClockPoller:
    """Reads the wall clock, queries departures and hands them to the display.

    The clock lives here so the query service only ever sees timestamps
    passed in as arguments.
    """

    def __init__(
        self,
        query_service: DepartureQueryService,
        route: Route,
        config: AppConfig,
        display_adapter: DisplayAdapter,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the clock poller.

        Args:
            query_service: Service computing upcoming departures.
            route: The route being displayed.
            config: Application configuration (refresh interval, departure count).
            display_adapter: Where each refresh is rendered.
            clock: Source of the current local time.
        """
        self.query_service = query_service
        self.route = route
        self.config = config
        self.display_adapter = display_adapter
        self.clock = clock
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start the clock poller."""
        if self._task is not None and not self._task.done():
            logger.warning("Clock poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started clock poller for '{self.route.identifier}' "
            f"(every {self.config.refresh_interval_seconds}s)"
        )

    async def stop(self) -> None:
        """Stop the clock poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Clock poller cancelled")
            logger.info("Stopped clock poller")

    async def wait(self) -> None:
        """Wait until the poller task finishes (it runs until stopped)."""
        if self._task is not None:
            await self._task

    async def refresh(self) -> None:
        """Query departures for the current time and display them."""
        now = self.clock()
        upcoming = self.query_service.next_departures(
            self.route, now, self.config.departures_count
        )
        if not upcoming:
            logger.debug(f"Service ended for '{self.route.identifier}' at {now:%H:%M}")
        await self.display_adapter.display_departures(self.route, now, upcoming)

    async def _poll_loop(self) -> None:
        """Main polling loop; runs until cancelled by stop()."""
        # Do initial update immediately
        await self.refresh()

        while True:
            await asyncio.sleep(self.config.refresh_interval_seconds)
            await self.refresh()
