"""Time-of-day parsing for timetable strings."""

from dataclasses import dataclass

from bus_timetable.domain.models.parse_outcome import Parsed, Skipped, parse_int


@dataclass(frozen=True)
class TimeOfDay:
    """Hour and minute of a timetable entry.

    Values are not range checked. Out-of-range parts carry over like calendar
    arithmetic: "24:10" is 00:10 of the next day, "07:60" is 08:00 and
    "-1:30" is 23:30 of the previous day.
    """

    hour: int
    minute: int

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute


def parse_time_of_day(raw: str) -> Parsed[TimeOfDay] | Skipped:
    """Parse an "H:M" string into a TimeOfDay."""
    parts = raw.split(":")
    if len(parts) != 2:
        return Skipped(raw=raw, reason="expected exactly one ':'")

    hour = parse_int(parts[0])
    minute = parse_int(parts[1])
    if hour is None or minute is None:
        return Skipped(raw=raw, reason="hour and minute must be integers")

    return Parsed(raw=raw, value=TimeOfDay(hour=hour, minute=minute))
