"""Protocol for formatting departures."""

from datetime import datetime, timedelta
from typing import Protocol

from bus_timetable.domain.models.candidate import Candidate


class DepartureFormatterProtocol(Protocol):
    """Protocol for formatting departure times and durations."""

    def format_departure_time(self, candidate: Candidate) -> str:
        """Format the departure according to configuration.

        Args:
            candidate: The resolved departure to format.

        Returns:
            Either a relative time like "5m" or an absolute time like "07:15".
        """
        ...

    def format_countdown(self, candidate: Candidate) -> str:
        """Format the minutes left before departure (e.g., 'in 5 min')."""
        ...

    def format_clock(self, instant: datetime) -> str:
        """Format an instant as HH:MM in the configured time zone."""
        ...

    def format_compact_duration(self, delta: timedelta) -> str:
        """Format timedelta as compact hours and minutes (e.g., '2h40m', '5m', 'now')."""
        ...
