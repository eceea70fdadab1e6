"""JSON schedule and holiday list loader."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bus_timetable.adapters.config.app_config import AppConfig
from bus_timetable.domain.errors import ConfigMalformedError, ConfigNotFoundError
from bus_timetable.domain.models.holiday_set import HolidaySet
from bus_timetable.domain.models.schedule import DaySchedule, Schedule
from bus_timetable.domain.models.trip import Trip

logger = logging.getLogger(__name__)

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class TripDocument(BaseModel):
    """One trip as stored in the schedule file."""

    model_config = ConfigDict(frozen=True)

    depart: str
    arrive: str


class DayScheduleDocument(BaseModel):
    """One service type's trips as stored in the schedule file."""

    model_config = ConfigDict(frozen=True)

    outbound: list[TripDocument]

    def to_domain(self) -> DaySchedule:
        return DaySchedule(
            outbound=tuple(Trip(depart=t.depart, arrive=t.arrive) for t in self.outbound)
        )


class ScheduleDocument(BaseModel):
    """Schedule file layout (camelCase keys)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    route_name: str = Field(alias="routeName")
    stop_name: str = Field(alias="stopName")
    destination_name: str | None = Field(default=None, alias="destinationName")
    weekday: DayScheduleDocument
    saturday: DayScheduleDocument
    sunday_holiday: DayScheduleDocument = Field(alias="sundayHoliday")

    def to_domain(self) -> Schedule:
        return Schedule(
            route_name=self.route_name,
            stop_name=self.stop_name,
            destination_name=self.destination_name,
            weekday=self.weekday.to_domain(),
            saturday=self.saturday.to_domain(),
            sunday_holiday=self.sunday_holiday.to_domain(),
        )


class JsonScheduleRepository:
    """Loads the schedule and holiday list from files on a search path."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize with app config.

        Args:
            config: Provides file names and the extra data directories.
        """
        self.config = config

    def search_dirs(self) -> list[Path]:
        """Directories searched in order: configured ones, cwd, bundled data."""
        dirs = [Path(d).expanduser() for d in self.config.data_dir]
        dirs.append(Path.cwd())
        dirs.append(BUNDLED_DATA_DIR)
        return dirs

    def find_file(self, filename: str) -> Path:
        """Locate a data file.

        Raises:
            ConfigNotFoundError: If no searched directory contains the file.
        """
        direct = Path(filename).expanduser()
        if direct.is_absolute():
            if direct.is_file():
                return direct
            raise ConfigNotFoundError(direct.name, [str(direct.parent)])

        searched: list[str] = []
        for directory in self.search_dirs():
            candidate = directory / filename
            if candidate.is_file():
                logger.debug(f"Found {filename} at {candidate}")
                return candidate
            searched.append(str(directory))
        raise ConfigNotFoundError(filename, searched)

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigMalformedError(f"{path} is not valid UTF-8: {e}") from e

    def load_schedule(self) -> Schedule:
        """Load and validate the schedule file."""
        path = self.find_file(self.config.schedule_file)
        text = self._read_text(path)
        try:
            document = ScheduleDocument.model_validate_json(text)
        except ValidationError as e:
            raise ConfigMalformedError(f"Invalid schedule in {path}: {e}") from e

        schedule = document.to_domain()
        logger.info(
            f"Loaded schedule {schedule.route_name} ({schedule.stop_name}) from {path}: "
            f"{len(schedule.weekday.outbound)} weekday, "
            f"{len(schedule.saturday.outbound)} Saturday, "
            f"{len(schedule.sunday_holiday.outbound)} Sunday/holiday trips"
        )
        return schedule

    def load_holiday_lines(self) -> list[str]:
        """Read the raw holiday lines.

        The file holds one date per line; a JSON array of strings is accepted too.
        """
        path = self.find_file(self.config.holidays_file)
        text = self._read_text(path)

        if text.lstrip().startswith("["):
            try:
                entries = json.loads(text)
            except json.JSONDecodeError as e:
                raise ConfigMalformedError(f"Invalid holiday list in {path}: {e}") from e
            if not isinstance(entries, list):
                raise ConfigMalformedError(f"Holiday list in {path} must be an array")
            return [str(entry) for entry in entries]

        return text.splitlines()

    def load_holidays(self) -> HolidaySet:
        """Load the holiday set, dropping malformed lines."""
        holidays = HolidaySet.build(self.load_holiday_lines())
        for skipped in holidays.skipped:
            logger.debug(f"Ignoring holiday line {skipped.raw!r}: {skipped.reason}")
        return holidays
