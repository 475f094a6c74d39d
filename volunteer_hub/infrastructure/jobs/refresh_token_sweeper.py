"""Periodic refresh token sweep.

Runs ``CredentialService.sweep_expired`` (or any coroutine function with the
same shape) every ``interval_seconds`` on the running event loop. A failed
run is logged and the loop carries on; expiry is enforced on every refresh
regardless of whether the sweep has run.

Usage:
    sweeper = RefreshTokenSweeper(sweep, interval_seconds=3600, logger=logger)
    sweeper.start()
    ...
    await sweeper.stop()
"""

import asyncio
from collections.abc import Awaitable, Callable

from volunteer_hub.domain.protocols import LoggerProtocol


class RefreshTokenSweeper:
    """Owns one background task that sweeps on a fixed interval."""

    def __init__(
        self,
        sweep: Callable[[], Awaitable[int]],
        *,
        interval_seconds: float,
        logger: LoggerProtocol,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._sweep = sweep
        self._interval = interval_seconds
        self._logger = logger
        self._task: asyncio.Task[None] | None = None
        self._stopping = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop. Calling start on a running sweeper is a no-op."""
        if self.running:
            return
        self._stopping.clear()
        self._task = asyncio.create_task(self._run(), name="refresh-token-sweeper")
        self._logger.info("refresh_token_sweeper_started", interval=self._interval)

    async def stop(self) -> None:
        """Stop after the current run and wait for the task to finish."""
        if self._task is None:
            return
        self._stopping.set()
        await self._task
        self._task = None
        self._logger.info("refresh_token_sweeper_stopped")

    async def run_once(self) -> int:
        """Sweep now. Returns rows removed; sweep errors propagate."""
        return await self._sweep()

    async def _run(self) -> None:
        while not self._stopping.is_set():
            try:
                await self.run_once()
            except Exception as e:
                self._logger.error("refresh_token_sweep_failed", error=e)
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=self._interval)
            except TimeoutError:
                continue
