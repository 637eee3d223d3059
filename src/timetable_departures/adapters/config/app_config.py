"""12-factor configuration adapter using environment variables and TOML timetables."""

import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TIMETABLE_RESOURCE = "yakushido_sendai.toml"

# Refresh cadences offered by the settings dialog
ALLOWED_REFRESH_INTERVALS = (5, 10, 30, 60)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timetable source
    # If not set, the timetable bundled with the package is used
    timetable_file: str | None = Field(
        default=None,
        description="Path to a TOML timetable file with [route], [[weekday]] and [[weekend]]",
    )

    # Display configuration
    departures_count: int = Field(
        default=3, ge=1, description="Number of upcoming departures to show"
    )
    refresh_interval_seconds: int = Field(
        default=10, description="Interval between clock refreshes in seconds (5, 10, 30 or 60)"
    )
    show_timetable: bool = Field(
        default=False,
        description="Print the full timetable for the current day type once at startup",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        """Validate the refresh interval is one of the supported cadences."""
        if v not in ALLOWED_REFRESH_INTERVALS:
            raise ValueError(
                f"refresh_interval_seconds must be one of {', '.join(map(str, ALLOWED_REFRESH_INTERVALS))}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()

    def load_timetable_data(self) -> dict[str, Any]:
        """Load and parse the TOML timetable, falling back to the bundled one."""
        if not self.timetable_file:
            resource = resources.files("timetable_departures.data").joinpath(
                DEFAULT_TIMETABLE_RESOURCE
            )
            with resource.open("rb") as f:
                return tomllib.load(f)

        config_path = Path(self.timetable_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Timetable file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)
