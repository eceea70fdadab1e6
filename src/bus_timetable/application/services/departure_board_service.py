"""Departure board service."""

import logging
from datetime import datetime

from bus_timetable.application.services.timetable_resolver import (
    DEFAULT_LIMIT,
    TimetableResolver,
)
from bus_timetable.domain.errors import ScheduleLoadError
from bus_timetable.domain.models.board_snapshot import BoardSnapshot
from bus_timetable.domain.models.error_details import ErrorDetails
from bus_timetable.domain.models.transit_calendar import TransitCalendar
from bus_timetable.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)


class DepartureBoardService:
    """Loads timetable data once and builds board snapshots from it."""

    def __init__(
        self,
        repository: ScheduleRepository,
        calendar: TransitCalendar,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        """Initialize with a schedule repository.

        Args:
            repository: Source of the schedule and the holiday list.
            calendar: Calendar in the route's time zone.
            limit: Number of upcoming departures shown on the board.
        """
        self._repository = repository
        self._calendar = calendar
        self._limit = limit
        self._resolver: TimetableResolver | None = None

    def load(self) -> TimetableResolver:
        """Load schedule and holidays unless already loaded.

        Raises:
            ScheduleLoadError: If either source cannot be loaded.
        """
        if self._resolver is None:
            schedule = self._repository.load_schedule()
            holidays = self._repository.load_holidays()
            if holidays.skipped:
                logger.debug(f"Ignored {len(holidays.skipped)} malformed holiday line(s)")
            logger.info(
                f"Loaded timetable for {schedule.route_name} at {schedule.stop_name} "
                f"with {len(holidays)} holiday(s)"
            )
            self._resolver = TimetableResolver(schedule, holidays, self._calendar)
        return self._resolver

    def reload(self) -> None:
        """Forget loaded data so the next snapshot reads the sources again."""
        self._resolver = None

    def build_snapshot(self, now: datetime) -> BoardSnapshot:
        """Build the board for ``now``; load failures become an error snapshot."""
        try:
            resolver = self.load()
        except ScheduleLoadError as e:
            logger.error(f"Failed to load timetable: {e}")
            return BoardSnapshot(
                generated_at=now,
                error=ErrorDetails(kind=e.kind, reason=str(e)),
            )

        schedule = resolver.schedule
        return BoardSnapshot(
            generated_at=now,
            route_name=schedule.route_name,
            stop_name=schedule.stop_name,
            destination_name=schedule.destination_name,
            service_type=resolver.service_type(now),
            next_departures=tuple(resolver.next_departures(now, self._limit)),
            last_departure=resolver.last_departure(now),
        )
