"""Unit tests for RefreshTokenSweeper."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from volunteer_hub.infrastructure.jobs import RefreshTokenSweeper


@pytest.mark.unit
class TestRefreshTokenSweeper:
    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError, match="positive"):
            RefreshTokenSweeper(AsyncMock(), interval_seconds=0, logger=Mock())

    async def test_run_once_returns_removed(self):
        sweep = AsyncMock(return_value=3)
        sweeper = RefreshTokenSweeper(sweep, interval_seconds=60, logger=Mock())

        assert await sweeper.run_once() == 3
        sweep.assert_awaited_once()

    async def test_run_once_propagates_failure(self):
        logger = Mock()
        sweeper = RefreshTokenSweeper(
            AsyncMock(side_effect=RuntimeError("database unavailable")),
            interval_seconds=60,
            logger=logger,
        )

        with pytest.raises(RuntimeError, match="database unavailable"):
            await sweeper.run_once()
        logger.error.assert_not_called()

    async def test_loop_runs_until_stopped(self):
        swept = asyncio.Event()

        async def sweep() -> int:
            swept.set()
            return 1

        sweeper = RefreshTokenSweeper(sweep, interval_seconds=0.01, logger=Mock())

        sweeper.start()
        await asyncio.wait_for(swept.wait(), timeout=1)
        assert sweeper.running
        await sweeper.stop()

        assert not sweeper.running

    async def test_loop_survives_failed_runs(self):
        calls = 0
        recovered = asyncio.Event()
        failure = RuntimeError("transient")
        logger = Mock()

        async def sweep() -> int:
            nonlocal calls
            calls += 1
            if calls == 1:
                raise failure
            recovered.set()
            return 0

        sweeper = RefreshTokenSweeper(sweep, interval_seconds=0.01, logger=logger)

        sweeper.start()
        await asyncio.wait_for(recovered.wait(), timeout=1)
        await sweeper.stop()

        assert calls >= 2
        logger.error.assert_called_once_with(
            "refresh_token_sweep_failed", error=failure
        )

    async def test_start_twice_keeps_one_task(self):
        logger = Mock()
        sweeper = RefreshTokenSweeper(
            AsyncMock(return_value=0), interval_seconds=60, logger=logger
        )

        sweeper.start()
        sweeper.start()
        await sweeper.stop()

        started = [
            c for c in logger.info.call_args_list
            if c.args == ("refresh_token_sweeper_started",)
        ]
        assert len(started) == 1

    async def test_stop_without_start(self):
        sweeper = RefreshTokenSweeper(
            AsyncMock(return_value=0), interval_seconds=60, logger=Mock()
        )

        await sweeper.stop()

        assert not sweeper.running
