"""Unit tests for KeyedLock.

Tests cover:
- Mutual exclusion for one key
- Independence of different keys
- Registry cleanup once no task holds or waits
- Release on exception
"""

import asyncio

import pytest

from volunteer_hub.core.keyed_lock import KeyedLock


@pytest.mark.unit
class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_same_key_is_mutually_exclusive(self):
        # Arrange
        locks = KeyedLock()
        inside = 0
        peak = 0

        async def critical():
            nonlocal inside, peak
            async with locks.hold("event-1"):
                inside += 1
                peak = max(peak, inside)
                await asyncio.sleep(0)
                await asyncio.sleep(0)
                inside -= 1

        # Act
        await asyncio.gather(*(critical() for _ in range(10)))

        # Assert
        assert peak == 1

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block_each_other(self):
        locks = KeyedLock()
        entered = asyncio.Event()

        async def holder():
            async with locks.hold("a"):
                await entered.wait()

        task = asyncio.create_task(holder())
        await asyncio.sleep(0)

        async with locks.hold("b"):
            entered.set()

        await asyncio.wait_for(task, timeout=1)

    @pytest.mark.asyncio
    async def test_registry_is_empty_after_release(self):
        locks = KeyedLock()

        async with locks.hold(("event", 1)):
            assert locks.is_held(("event", 1))
            assert len(locks) == 1

        assert not locks.is_held(("event", 1))
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_lock_released_when_block_raises(self):
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("k"):
                raise RuntimeError("boom")

        assert len(locks) == 0
        async with locks.hold("k"):
            pass

    @pytest.mark.asyncio
    async def test_waiters_keep_lock_alive_until_last_release(self):
        locks = KeyedLock()
        order: list[int] = []

        async def worker(n: int):
            async with locks.hold("k"):
                order.append(n)
                await asyncio.sleep(0)

        await asyncio.gather(worker(1), worker(2), worker(3))

        assert order == [1, 2, 3]
        assert len(locks) == 0
