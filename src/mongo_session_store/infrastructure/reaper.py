"""Background task removing expired sessions."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

ReapFunction = Callable[[], Awaitable[int]]
ErrorCallback = Callable[[Exception], None]


class SessionReaper:
    """Periodically invokes a store's reap coroutine on the running event loop.

    Failures never stop the loop: they are logged, counted and reported to
    ``on_error``, and the next cycle retries.
    """

    def __init__(
        self,
        reap: ReapFunction,
        interval_seconds: float,
        on_error: Optional[ErrorCallback] = None,
    ):
        """Initialize the reaper.

        Args:
            reap: Coroutine function deleting expired sessions; returns the
                number of sessions removed.
            interval_seconds: Delay between two reap cycles.
            on_error: Optional callback receiving each reap failure.
        """
        self._reap = reap
        self.interval_seconds = interval_seconds
        self.on_error = on_error
        self.error_count = 0
        self.last_error: Optional[Exception] = None
        self.removed_count = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the reap loop. Must be called from a running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Session reaper started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the reap loop and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("Session reaper stopped")

    async def run_once(self) -> int:
        """Run a single reap cycle, recording any failure.

        Returns:
            int: Number of sessions removed (0 when the cycle failed).
        """
        try:
            removed = await self._reap()
        except Exception as e:
            self.error_count += 1
            self.last_error = e
            logger.warning(f"Session reap failed, retrying next cycle: {e}")
            if self.on_error is not None:
                try:
                    self.on_error(e)
                except Exception as callback_error:
                    logger.warning(f"Reap error callback failed: {callback_error}")
            return 0

        self.removed_count += removed
        if removed:
            logger.debug(f"Reaped {removed} expired sessions")
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            await self.run_once()
