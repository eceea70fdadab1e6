"""Candidate domain model."""

from dataclasses import dataclass
from datetime import datetime

from bus_timetable.domain.models.trip import Trip


@dataclass(frozen=True)
class Candidate:
    """A trip resolved against a calendar day, relative to a reference instant."""

    trip: Trip
    departure: datetime
    arrival: datetime
    reference: datetime

    @property
    def id(self) -> str:
        return self.trip.key

    @property
    def depart_string(self) -> str:
        return self.trip.depart

    @property
    def arrive_string(self) -> str:
        return self.trip.arrive

    @property
    def minutes_until(self) -> int:
        """Whole minutes until departure, floored and never negative."""
        seconds = (self.departure - self.reference).total_seconds()
        return max(0, int(seconds // 60))

    @property
    def is_departed(self) -> bool:
        return self.departure <= self.reference
