"""Timetable data bundled with the package."""
