"""Protocol for building board snapshots."""

from datetime import datetime
from typing import Protocol

from bus_timetable.domain.models.board_snapshot import BoardSnapshot


class BoardSnapshotBuilderProtocol(Protocol):
    """Protocol for anything that can build the board for an instant."""

    def build_snapshot(self, now: datetime) -> BoardSnapshot:
        """Build the board shown at ``now``."""
        ...
