"""Reminder domain model."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from bus_timetable.domain.models.trip import Trip


@dataclass(frozen=True)
class Reminder:
    """A pending alert ahead of a departure, keyed by its trip."""

    key: str
    trip: Trip
    departure: datetime
    trigger_at: datetime
    lead: timedelta
    title: str
    body: str
