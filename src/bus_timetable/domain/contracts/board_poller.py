"""Protocol for periodic board refresh."""

from typing import Protocol


class BoardPollerProtocol(Protocol):
    """Protocol for refreshing a departure board on a timer."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
