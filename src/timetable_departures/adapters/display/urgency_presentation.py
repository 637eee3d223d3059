"""Presentation lookup for urgency tiers."""

from dataclasses import dataclass

from timetable_departures.domain.models import UrgencyTier


@dataclass(frozen=True)
class UrgencyStyle:
    """How a highlighted departure is emphasised for one urgency tier."""

    color: str
    animation: str
    message: str


URGENCY_PRESENTATION: dict[UrgencyTier, UrgencyStyle] = {
    UrgencyTier.IMMINENT: UrgencyStyle(color="red", animation="ping", message="Arriving now"),
    UrgencyTier.RUSHING: UrgencyStyle(color="orange", animation="pulse-fast", message="Hurry!"),
    UrgencyTier.SOON_WARNING: UrgencyStyle(
        color="yellow", animation="pulse", message="Almost here"
    ),
    UrgencyTier.PREPARE: UrgencyStyle(color="blue", animation="pulse-slow", message="Get ready"),
    UrgencyTier.RELAXED: UrgencyStyle(
        color="green", animation="pulse-very-slow", message="Plenty of time"
    ),
}

# ANSI foreground colors for terminal output
ANSI_COLORS: dict[str, str] = {
    "red": "\033[31m",
    "orange": "\033[38;5;208m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "green": "\033[32m",
}
ANSI_RESET = "\033[0m"


def style_for(tier: UrgencyTier) -> UrgencyStyle:
    """Return the presentation style for an urgency tier."""
    return URGENCY_PRESENTATION[tier]
