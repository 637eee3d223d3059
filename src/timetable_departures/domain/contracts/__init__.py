"""Protocols shared between the application and adapter layers."""

from timetable_departures.domain.contracts.wait_formatter import WaitFormatterProtocol

__all__ = ["WaitFormatterProtocol"]
