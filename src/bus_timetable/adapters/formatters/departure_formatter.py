"""Formatter for departure times."""

from datetime import datetime, timedelta

from bus_timetable.adapters.config.app_config import AppConfig
from bus_timetable.domain.contracts.departure_formatter import DepartureFormatterProtocol
from bus_timetable.domain.models.candidate import Candidate

# Minutes left at or below which a departure is highlighted
SOON_THRESHOLD_MINUTES = 5


class DepartureFormatter(DepartureFormatterProtocol):
    """Formatter for departure times based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone and time format settings.
        """
        self.config = config
        self.calendar = config.calendar()

    def format_departure_time(self, candidate: Candidate) -> str:
        """Format departure time according to configuration."""
        if self.config.time_format == "minutes":
            return self.format_compact_duration(candidate.departure - candidate.reference)
        # "at" format
        return self.format_clock(candidate.departure)

    def format_countdown(self, candidate: Candidate) -> str:
        """Format the whole minutes left (e.g., 'in 5 min')."""
        return f"in {candidate.minutes_until} min"

    def format_clock(self, instant: datetime) -> str:
        """Format an instant as HH:MM in the configured time zone."""
        return self.calendar.localize(instant).strftime("%H:%M")

    def format_compact_duration(self, delta: timedelta) -> str:
        """Format timedelta as compact hours and minutes (e.g., '2h40m', '5m', 'now')."""
        total_seconds = int(delta.total_seconds())
        if total_seconds <= 0:
            return "now"
        if total_seconds < 60:
            return "<1m"

        total_minutes = total_seconds // 60
        if total_minutes < 60:
            return f"{total_minutes}m"

        hours = total_minutes // 60
        minutes = total_minutes % 60
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h{minutes}m"

    def urgency(self, candidate: Candidate) -> str:
        """Classify how pressing a departure is: 'departing', 'soon' or 'normal'."""
        minutes = candidate.minutes_until
        if minutes <= 0:
            return "departing"
        if minutes <= SOON_THRESHOLD_MINUTES:
            return "soon"
        return "normal"

    def can_remind(self, candidate: Candidate, lead_minutes: int | None = None) -> bool:
        """Whether there is still time for a reminder; defaults to the configured lead."""
        if lead_minutes is None:
            lead_minutes = self.config.reminder_lead_minutes
        return candidate.minutes_until >= lead_minutes
