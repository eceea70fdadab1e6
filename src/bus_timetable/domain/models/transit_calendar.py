"""Calendar bound to the fixed time zone of the route."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from bus_timetable.domain.models.time_of_day import TimeOfDay

DEFAULT_TIMEZONE = "Asia/Tokyo"

# Sunday-first weekday numbering: 1=Sunday .. 7=Saturday
SUNDAY = 1
SATURDAY = 7


def format_date_key(year: int, month: int, day: int) -> str:
    """Format a calendar day as an unpadded "Y/M/D" key."""
    return f"{year}/{month}/{day}"


@dataclass(frozen=True)
class TransitCalendar:
    """Gregorian calendar in a single time zone.

    Every classification and resolution call takes one of these so that the
    zone is an explicit input rather than the host's local zone.
    """

    timezone: tzinfo

    @classmethod
    def for_zone(cls, name: str) -> "TransitCalendar":
        return cls(timezone=ZoneInfo(name))

    @classmethod
    def default(cls) -> "TransitCalendar":
        return cls.for_zone(DEFAULT_TIMEZONE)

    def localize(self, instant: datetime) -> datetime:
        """Return the instant as wall time in this calendar's zone.

        Naive datetimes are taken to already be wall time in this zone.
        """
        if instant.tzinfo is None:
            return instant.replace(tzinfo=self.timezone)
        return instant.astimezone(self.timezone)

    def local_date(self, instant: datetime) -> date:
        return self.localize(instant).date()

    def weekday_number(self, instant: datetime) -> int:
        """Weekday of the instant, 1=Sunday .. 7=Saturday."""
        return self.localize(instant).isoweekday() % 7 + 1

    def date_key(self, instant: datetime) -> str:
        local = self.localize(instant)
        return format_date_key(local.year, local.month, local.day)

    def combine(self, day: date, time_of_day: TimeOfDay) -> datetime:
        """Build the instant for a time of day on a calendar day, seconds zero."""
        midnight = datetime(day.year, day.month, day.day, tzinfo=self.timezone)
        return midnight + timedelta(minutes=time_of_day.total_minutes)
