"""Urgency tier domain model."""

from enum import Enum


class UrgencyTier(str, Enum):
    """Wait-time bucket used to pick presentation emphasis."""

    IMMINENT = "imminent"  # <= 1 minute
    RUSHING = "rushing"  # <= 3 minutes
    SOON_WARNING = "soon_warning"  # <= 5 minutes
    PREPARE = "prepare"  # <= 10 minutes
    RELAXED = "relaxed"  # > 10 minutes

    @classmethod
    def from_wait_minutes(cls, wait_minutes: int) -> "UrgencyTier":
        """Map a wait in minutes to its urgency tier."""
        if wait_minutes <= 1:
            return cls.IMMINENT
        if wait_minutes <= 3:
            return cls.RUSHING
        if wait_minutes <= 5:
            return cls.SOON_WARNING
        if wait_minutes <= 10:
            return cls.PREPARE
        return cls.RELAXED
