"""Main entry point for the refreshing departure board."""

import asyncio
import logging
import sys

from bus_timetable.adapters.config import AppConfig, JsonScheduleRepository
from bus_timetable.adapters.display import ConsoleBoardDisplay
from bus_timetable.adapters.formatters import DepartureFormatter
from bus_timetable.adapters.pollers import RefreshPoller
from bus_timetable.application.services import DepartureBoardService
from bus_timetable.domain.errors import ScheduleLoadError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_poller(config: AppConfig) -> RefreshPoller:
    """Wire the board service, console display and poller from config."""
    calendar = config.calendar()
    board_service = DepartureBoardService(
        JsonScheduleRepository(config),
        calendar,
        limit=config.next_departures_limit,
    )
    display = ConsoleBoardDisplay(DepartureFormatter(config))
    return RefreshPoller(board_service, display, config)


async def run_board(config: AppConfig) -> None:
    """Run the refreshing board until cancelled."""
    poller = build_poller(config)
    await poller.start()
    try:
        await poller.wait()
    finally:
        await poller.stop()


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    try:
        config.load_config_file()
    except ScheduleLoadError as e:
        configure_logging(config.log_level)
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)
    logger.info(
        f"Showing the next {config.next_departures_limit} departure(s) in {config.timezone}"
    )
    await run_board(config)


def board_main() -> None:
    """Synchronous entry point for the board command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    board_main()
