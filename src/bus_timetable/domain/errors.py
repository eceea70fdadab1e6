"""Errors raised while loading timetable data."""


class ScheduleLoadError(Exception):
    """Timetable data could not be loaded."""

    kind = "load_failed"


class ConfigNotFoundError(ScheduleLoadError, FileNotFoundError):
    """A schedule or holiday file was not found in any searched location."""

    kind = "not_found"

    def __init__(self, filename: str, searched: list[str]) -> None:
        self.filename = filename
        self.searched = searched
        locations = ", ".join(searched) if searched else "(none)"
        super().__init__(f"{filename} not found (searched: {locations})")


class ConfigMalformedError(ScheduleLoadError, ValueError):
    """A schedule or holiday file exists but has an invalid structure."""

    kind = "malformed"
