"""Upcoming departures for a single fixed-timetable transit route."""

__version__ = "0.1.0"
