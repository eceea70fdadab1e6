"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failure to load timetable data."""

    model_config = ConfigDict(frozen=True)

    kind: str | None = None
    reason: str
