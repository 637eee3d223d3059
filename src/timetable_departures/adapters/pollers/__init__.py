"""Pollers driving periodic refreshes."""

from timetable_departures.adapters.pollers.clock_poller import ClockPoller

__all__ = ["ClockPoller"]
