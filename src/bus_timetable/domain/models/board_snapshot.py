"""Board snapshot domain model."""

from dataclasses import dataclass
from datetime import datetime

from bus_timetable.domain.models.candidate import Candidate
from bus_timetable.domain.models.error_details import ErrorDetails
from bus_timetable.domain.models.service_type import ServiceType


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything a departure board shows at one instant."""

    generated_at: datetime
    route_name: str | None = None
    stop_name: str | None = None
    destination_name: str | None = None
    service_type: ServiceType | None = None
    next_departures: tuple[Candidate, ...] = ()
    last_departure: str | None = None
    error: ErrorDetails | None = None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def is_end_of_service(self) -> bool:
        """True when data loaded fine but no bus is left today."""
        return self.error is None and not self.next_departures
