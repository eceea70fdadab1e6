"""Timetable resolution: concrete departures for a calendar day."""

import logging
from datetime import datetime

from bus_timetable.application.services.day_classifier import service_type as classify
from bus_timetable.domain.models.candidate import Candidate
from bus_timetable.domain.models.holiday_set import HolidaySet
from bus_timetable.domain.models.parse_outcome import Skipped
from bus_timetable.domain.models.schedule import Schedule
from bus_timetable.domain.models.service_type import ServiceType
from bus_timetable.domain.models.time_of_day import parse_time_of_day
from bus_timetable.domain.models.transit_calendar import TransitCalendar
from bus_timetable.domain.models.trip import Trip

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3


def trips_for(service: ServiceType, schedule: Schedule) -> tuple[Trip, ...]:
    """Return the outbound trips of the timetable for a service type."""
    if service is ServiceType.SATURDAY:
        return schedule.saturday.outbound
    if service is ServiceType.SUNDAY_HOLIDAY:
        return schedule.sunday_holiday.outbound
    return schedule.weekday.outbound


def resolve_trip(
    trip: Trip, base: datetime, calendar: TransitCalendar
) -> Candidate | Skipped:
    """Place a trip on the calendar day of ``base``.

    Returns ``Skipped`` when either time string is malformed; such trips are
    never offered as candidates.
    """
    depart = parse_time_of_day(trip.depart)
    if isinstance(depart, Skipped):
        return depart
    arrive = parse_time_of_day(trip.arrive)
    if isinstance(arrive, Skipped):
        return arrive

    day = calendar.local_date(base)
    return Candidate(
        trip=trip,
        departure=calendar.combine(day, depart.value),
        arrival=calendar.combine(day, arrive.value),
        reference=base,
    )


def resolve_trips(
    base: datetime, schedule: Schedule, holidays: HolidaySet, calendar: TransitCalendar
) -> list[Candidate | Skipped]:
    """Resolve every trip of the day's timetable, keeping skipped entries."""
    base = calendar.localize(base)
    service = classify(base, holidays, calendar)
    return [resolve_trip(trip, base, calendar) for trip in trips_for(service, schedule)]


def resolve_day(
    base: datetime, schedule: Schedule, holidays: HolidaySet, calendar: TransitCalendar
) -> list[Candidate]:
    """All candidates of the day's timetable in source order, malformed trips dropped."""
    candidates: list[Candidate] = []
    for outcome in resolve_trips(base, schedule, holidays, calendar):
        if isinstance(outcome, Skipped):
            logger.debug(f"Skipping trip with malformed time {outcome.raw!r}: {outcome.reason}")
            continue
        candidates.append(outcome)
    return candidates


def next_departures(
    now: datetime,
    schedule: Schedule,
    holidays: HolidaySet,
    calendar: TransitCalendar,
    limit: int = DEFAULT_LIMIT,
) -> list[Candidate]:
    """The next ``limit`` departures of today that have not left yet.

    A bus departing exactly at ``now`` still counts. Only today's timetable is
    considered, so an empty list means service has ended for the day.
    """
    if limit <= 0:
        return []
    now = calendar.localize(now)
    upcoming = [c for c in resolve_day(now, schedule, holidays, calendar) if c.departure >= now]
    # sorted() is stable, ties keep timetable order
    upcoming = sorted(upcoming, key=lambda c: c.departure)
    return upcoming[:limit]


def find_by_departure_time(
    hhmm: str,
    base: datetime,
    schedule: Schedule,
    holidays: HolidaySet,
    calendar: TransitCalendar,
) -> Candidate | None:
    """Find the trip whose depart string equals ``hhmm`` exactly ("07:05" != "7:05")."""
    for candidate in resolve_day(base, schedule, holidays, calendar):
        if candidate.trip.depart == hhmm:
            return candidate
    return None


def timetable_for(
    instant: datetime, schedule: Schedule, holidays: HolidaySet, calendar: TransitCalendar
) -> tuple[Trip, ...]:
    """The raw trips of the timetable that applies on the instant's day."""
    return trips_for(classify(instant, holidays, calendar), schedule)


def last_departure(
    instant: datetime, schedule: Schedule, holidays: HolidaySet, calendar: TransitCalendar
) -> str | None:
    """Depart string of the day's last trip, if the day has any."""
    trips = timetable_for(instant, schedule, holidays, calendar)
    return trips[-1].depart if trips else None


class TimetableResolver:
    """Resolves departures against one schedule and holiday snapshot."""

    def __init__(
        self,
        schedule: Schedule,
        holidays: HolidaySet,
        calendar: TransitCalendar | None = None,
    ) -> None:
        """Initialize with immutable snapshots.

        Args:
            schedule: The route's timetable.
            holidays: Days that run the Sunday/holiday timetable.
            calendar: Calendar in the route's time zone (Asia/Tokyo by default).
        """
        self._schedule = schedule
        self._holidays = holidays
        self._calendar = calendar or TransitCalendar.default()

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def calendar(self) -> TransitCalendar:
        return self._calendar

    def service_type(self, instant: datetime) -> ServiceType:
        return classify(instant, self._holidays, self._calendar)

    def resolve_day(self, base: datetime) -> list[Candidate]:
        return resolve_day(base, self._schedule, self._holidays, self._calendar)

    def next_departures(self, now: datetime, limit: int = DEFAULT_LIMIT) -> list[Candidate]:
        return next_departures(now, self._schedule, self._holidays, self._calendar, limit)

    def find_by_departure_time(self, hhmm: str, day: datetime) -> Candidate | None:
        return find_by_departure_time(hhmm, day, self._schedule, self._holidays, self._calendar)

    def timetable_for(self, instant: datetime) -> tuple[Trip, ...]:
        return timetable_for(instant, self._schedule, self._holidays, self._calendar)

    def last_departure(self, instant: datetime) -> str | None:
        return last_departure(instant, self._schedule, self._holidays, self._calendar)
