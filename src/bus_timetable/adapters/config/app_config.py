"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bus_timetable.domain.errors import ConfigMalformedError, ConfigNotFoundError
from bus_timetable.domain.models.transit_calendar import DEFAULT_TIMEZONE, TransitCalendar


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Timetable data
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA time zone every timetable time is interpreted in",
    )
    data_dir: list[str] = Field(
        default_factory=list,
        description="Directories searched for data files before the working directory",
    )
    schedule_file: str = Field(default="times.json", description="Schedule JSON file name")
    holidays_file: str = Field(
        default="holidays.json",
        description="Holiday list file name (one Y/M/D date per line)",
    )

    # Display configuration
    next_departures_limit: int = Field(
        default=3, description="Number of upcoming departures shown on the board"
    )
    time_format: str = Field(default="minutes", description="Time format: 'minutes' or 'at'")
    refresh_offset_seconds: float = Field(
        default=1.0,
        description="Seconds after each minute boundary at which the board refreshes",
    )

    # Reminders
    reminder_lead_minutes: int = Field(
        default=5, description="Minutes before departure at which a reminder fires"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Optional TOML file with [data], [display] and [reminders] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding the settings above",
    )

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: str) -> str:
        """Validate time format is either 'minutes' or 'at'."""
        if v not in ("minutes", "at"):
            raise ValueError("time_format must be either 'minutes' or 'at'")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate the time zone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("next_departures_limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        """Validate at least one departure is shown."""
        if v < 1:
            raise ValueError("next_departures_limit must be at least 1")
        return v

    @field_validator("reminder_lead_minutes", "refresh_offset_seconds")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Validate lead times and offsets are not negative."""
        if v < 0:
            raise ValueError("value must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    def calendar(self) -> TransitCalendar:
        """Calendar in the configured time zone."""
        return TransitCalendar.for_zone(self.timezone)

    def load_config_file(self) -> dict[str, Any]:
        """Load the TOML file, if configured, and apply its settings.

        Raises:
            ConfigNotFoundError: If config_file is set but does not exist.
            ConfigMalformedError: If the file is not valid TOML or holds an invalid value.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise ConfigNotFoundError(config_path.name, [str(config_path.parent)])

        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigMalformedError(f"Invalid TOML in {config_path}: {e}") from e

        try:
            self._apply_settings(toml_data)
        except (TypeError, ValueError) as e:
            raise ConfigMalformedError(f"Invalid setting in {config_path}: {e}") from e
        return toml_data

    def _apply_settings(self, toml_data: dict[str, Any]) -> None:
        data = toml_data.get("data", {})
        if "timezone" in data:
            self.timezone = self.validate_timezone(str(data["timezone"]))
        if "data_dir" in data:
            data_dir = data["data_dir"]
            if not isinstance(data_dir, list):
                data_dir = [data_dir]
            self.data_dir = [str(d) for d in data_dir]
        if "schedule_file" in data:
            self.schedule_file = str(data["schedule_file"])
        if "holidays_file" in data:
            self.holidays_file = str(data["holidays_file"])

        display = toml_data.get("display", {})
        if "next_departures_limit" in display:
            self.next_departures_limit = self.validate_limit(int(display["next_departures_limit"]))
        if "time_format" in display:
            self.time_format = self.validate_time_format(display["time_format"])
        if "refresh_offset_seconds" in display:
            offset = float(display["refresh_offset_seconds"])
            self.refresh_offset_seconds = self.validate_non_negative(offset)

        reminders = toml_data.get("reminders", {})
        if "lead_minutes" in reminders:
            self.reminder_lead_minutes = self.validate_non_negative(int(reminders["lead_minutes"]))
