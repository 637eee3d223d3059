"""Ports (interfaces) for the ports-and-adapters architecture."""

from timetable_departures.domain.ports.departure_query_service import DepartureQueryService
from timetable_departures.domain.ports.display_adapter import DisplayAdapter

__all__ = [
    "DepartureQueryService",
    "DisplayAdapter",
]
