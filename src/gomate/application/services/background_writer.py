"""Fire-and-forget persistence writes."""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class BackgroundWriter:
    """Runs persistence writes as tracked background tasks.

    Failures are logged and never propagate to the caller. ``flush()`` waits
    for every write scheduled so far.
    """

    def __init__(self) -> None:
        """Initialize with no pending writes."""
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        """Number of writes that have not finished yet."""
        return len(self._pending)

    def schedule(self, write: Coroutine[Any, Any, None], description: str) -> None:
        """Schedule a write on the running event loop.

        Args:
            write: Coroutine performing the write.
            description: What is written, used in the error log.

        Raises:
            RuntimeError: If called outside a running event loop. The write is discarded.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            write.close()
            raise
        task = loop.create_task(self._run(write, description))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def flush(self) -> None:
        """Wait for all scheduled writes to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    @staticmethod
    async def _run(write: Coroutine[Any, Any, None], description: str) -> None:
        try:
            await write
        except Exception as e:
            logger.error(f"Failed to persist {description}: {e}", exc_info=True)
