"""Display adapter port."""

from typing import Protocol

from bus_timetable.domain.models.board_snapshot import BoardSnapshot


class DisplayAdapter(Protocol):
    """Port for presenting a departure board to users."""

    async def display_board(self, snapshot: BoardSnapshot) -> None:
        """Render one board snapshot."""
        ...
