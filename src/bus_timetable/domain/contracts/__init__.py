"""Protocols shared between application and adapters."""

from bus_timetable.domain.contracts.board_poller import BoardPollerProtocol
from bus_timetable.domain.contracts.board_snapshot_builder import BoardSnapshotBuilderProtocol
from bus_timetable.domain.contracts.departure_formatter import DepartureFormatterProtocol

__all__ = [
    "BoardPollerProtocol",
    "BoardSnapshotBuilderProtocol",
    "DepartureFormatterProtocol",
]
