"""Refresh poller rebuilding the board every minute."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from bus_timetable.domain.contracts.board_poller import BoardPollerProtocol
from bus_timetable.domain.contracts.board_snapshot_builder import BoardSnapshotBuilderProtocol

if TYPE_CHECKING:
    from bus_timetable.adapters.config.app_config import AppConfig
    from bus_timetable.domain.models.board_snapshot import BoardSnapshot
    from bus_timetable.domain.ports.display_adapter import DisplayAdapter

logger = logging.getLogger(__name__)

# Never sleep less than this, so a clock sitting on a boundary cannot spin
MIN_DELAY_SECONDS = 0.05


def seconds_until_next_refresh(now: datetime, offset_seconds: float) -> float:
    """Seconds from ``now`` until just after the next minute boundary."""
    next_minute = now.replace(second=0, microsecond=0) + timedelta(minutes=1)
    delay = (next_minute - now).total_seconds() + offset_seconds
    return max(MIN_DELAY_SECONDS, delay)


class RefreshPoller(BoardPollerProtocol):
    """Rebuilds and displays the board right after every minute boundary."""

    def __init__(
        self,
        board_service: BoardSnapshotBuilderProtocol,
        display: DisplayAdapter,
        config: AppConfig,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the refresh poller.

        Args:
            board_service: Builds board snapshots.
            display: Where snapshots are shown.
            config: Application configuration (refresh offset).
            clock: Returns the current aware instant; defaults to the system clock.
        """
        self.board_service = board_service
        self.display = display
        self.config = config
        self.clock = clock or (lambda: datetime.now(UTC))
        self.last_snapshot: BoardSnapshot | None = None
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the refresh poller."""
        if self.is_running:
            logger.warning("Refresh poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info("Started refresh poller task")

    async def stop(self) -> None:
        """Stop the refresh poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Refresh poller cancelled")
            logger.info("Stopped refresh poller")

    async def wait(self) -> None:
        """Wait for the poll loop to end."""
        if self._task is not None:
            await self._task

    async def refresh_once(self) -> BoardSnapshot:
        """Build a snapshot for the current instant and display it."""
        snapshot = self.board_service.build_snapshot(self.clock())
        self.last_snapshot = snapshot
        try:
            await self.display.display_board(snapshot)
        except Exception as e:
            logger.error(f"Failed to display board: {e}")
        return snapshot

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        # Do initial update immediately
        await self.refresh_once()

        try:
            while True:
                delay = seconds_until_next_refresh(
                    self.clock(), self.config.refresh_offset_seconds
                )
                logger.debug(f"Next board refresh in {delay:.2f}s")
                await asyncio.sleep(delay)
                await self.refresh_once()
        except asyncio.CancelledError:
            logger.info("Refresh poller cancelled")
            raise
