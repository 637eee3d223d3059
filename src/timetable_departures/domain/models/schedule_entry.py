"""Schedule entry domain model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class ScheduleEntry(BaseModel):
    """All departures within one hour of the day."""

    model_config = ConfigDict(frozen=True)

    hour: StrictInt = Field(ge=0, le=23)
    minutes: tuple[StrictInt, ...]  # TOML arrays arrive as lists; items must be real ints

    @field_validator("minutes")
    @classmethod
    def validate_minutes(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Validate minutes are within 0-59 and strictly increasing."""
        if not v:
            raise ValueError("minutes must not be empty")
        for minute in v:
            if minute < 0 or minute > 59:
                raise ValueError(f"minute {minute} is outside 0-59")
        for previous, current in zip(v, v[1:]):
            if current <= previous:
                raise ValueError(
                    f"minutes must be strictly increasing, got {current} after {previous}"
                )
        return v
