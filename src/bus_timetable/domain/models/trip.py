"""Trip domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Trip:
    """One scheduled departure/arrival pair as local "HH:MM" strings."""

    depart: str
    arrive: str

    @property
    def key(self) -> str:
        """Deterministic identifier used for reminders and list rendering."""
        return f"bus_notify_{self.depart}_{self.arrive}"
