"""Holiday set domain model."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from bus_timetable.domain.models.parse_outcome import Parsed, Skipped, parse_int
from bus_timetable.domain.models.transit_calendar import TransitCalendar, format_date_key


def parse_holiday_line(raw: str) -> Parsed[str] | Skipped:
    """Normalize one "Y/M/D" line into an unpadded date key.

    Values are not range checked: "2024/13/99" yields a key that simply never
    matches a real calendar day.
    """
    parts = raw.split("/")
    if len(parts) != 3:
        return Skipped(raw=raw, reason="expected exactly three '/'-separated parts")

    numbers = [parse_int(part) for part in parts]
    if any(number is None for number in numbers):
        return Skipped(raw=raw, reason="year, month and day must be integers")

    year, month, day = numbers
    return Parsed(raw=raw, value=format_date_key(year, month, day))  # type: ignore[arg-type]


def parse_holiday_lines(raw_lines: Iterable[str]) -> list[Parsed[str] | Skipped]:
    """Trim lines, drop empty ones and parse the rest."""
    outcomes: list[Parsed[str] | Skipped] = []
    for line in raw_lines:
        stripped = line.strip()
        if not stripped:
            continue
        outcomes.append(parse_holiday_line(stripped))
    return outcomes


@dataclass(frozen=True)
class HolidaySet:
    """Calendar days that run the Sunday/holiday timetable."""

    keys: frozenset[str] = frozenset()
    skipped: tuple[Skipped, ...] = field(default=(), compare=False)

    @classmethod
    def build(cls, raw_lines: Iterable[str]) -> "HolidaySet":
        """Build a set from raw lines, dropping duplicates and malformed lines."""
        keys: set[str] = set()
        skipped: list[Skipped] = []
        for outcome in parse_holiday_lines(raw_lines):
            if isinstance(outcome, Skipped):
                skipped.append(outcome)
            else:
                keys.add(outcome.value)
        return cls(keys=frozenset(keys), skipped=tuple(skipped))

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def is_holiday(self, instant: datetime, calendar: TransitCalendar) -> bool:
        return calendar.date_key(instant) in self.keys
