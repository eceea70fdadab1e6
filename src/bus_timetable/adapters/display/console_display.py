"""Text departure board for terminals."""

import sys
from typing import TextIO

from bus_timetable.adapters.formatters.departure_formatter import DepartureFormatter
from bus_timetable.domain.models.board_snapshot import BoardSnapshot
from bus_timetable.domain.models.candidate import Candidate

END_OF_SERVICE_MESSAGE = "No more buses today."
LOAD_ERROR_TITLE = "Could not load timetable"

_URGENCY_MARKERS = {
    "departing": " [departing]",
    "soon": " [hurry]",
    "normal": "",
}


class ConsoleBoardDisplay:
    """Renders board snapshots as plain text."""

    def __init__(self, formatter: DepartureFormatter, stream: TextIO | None = None) -> None:
        """Initialize the display.

        Args:
            formatter: Formats times and countdowns.
            stream: Where to write; defaults to stdout.
        """
        self.formatter = formatter
        self.stream = stream or sys.stdout

    async def display_board(self, snapshot: BoardSnapshot) -> None:
        """Write one snapshot to the stream."""
        self.stream.write(self.render(snapshot) + "\n")
        self.stream.flush()

    def render(self, snapshot: BoardSnapshot) -> str:
        """Render a snapshot to text."""
        clock = self.formatter.format_clock(snapshot.generated_at)

        if snapshot.error is not None:
            return "\n".join(
                [
                    f"{LOAD_ERROR_TITLE}  ({clock})",
                    f"  {snapshot.error.reason}",
                    "  Check the data files and reload.",
                ]
            )

        lines = [self._header(snapshot, clock)]
        if snapshot.service_type is not None:
            lines.append(f"Today: {snapshot.service_type.label}")

        if snapshot.is_end_of_service:
            lines.append(END_OF_SERVICE_MESSAGE)
            return "\n".join(lines)

        lines.append("Next buses:")
        lines.extend(self.render_departure(c) for c in snapshot.next_departures)
        if snapshot.last_departure:
            lines.append(f"Last bus today: {snapshot.last_departure}")
        return "\n".join(lines)

    def render_departure(self, candidate: Candidate) -> str:
        """Render a single departure line."""
        marker = _URGENCY_MARKERS[self.formatter.urgency(candidate)]
        return (
            f"  {candidate.depart_string} dep  arr {candidate.arrive_string}  "
            f"{self.formatter.format_departure_time(candidate)}{marker}"
        )

    def _header(self, snapshot: BoardSnapshot, clock: str) -> str:
        stop = snapshot.stop_name or ""
        if snapshot.destination_name:
            stop = f"{stop} -> {snapshot.destination_name}"
        return f"{snapshot.route_name or ''}  {stop}  ({clock})"
