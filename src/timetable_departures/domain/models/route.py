"""Route domain model."""

from dataclasses import dataclass

from .timetable import Timetable


@dataclass(frozen=True)
class Route:
    """A single physical route with its weekly timetable."""

    identifier: str  # e.g. "yakushido-sendai"
    origin_label: str
    destination_label: str
    line_label: str
    timetable: Timetable
