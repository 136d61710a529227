"""Unit tests for KeyedLock."""

import asyncio

import pytest

from quill.util.locking import KeyedLock


class TestKeyedLock:
    """Tests for per-key mutual exclusion."""

    @pytest.mark.asyncio
    async def test_same_key_is_exclusive(self):
        locks = KeyedLock()
        active = 0
        peak = 0

        async def worker():
            nonlocal active, peak
            async with locks.hold("post"):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0.01)
                active -= 1

        await asyncio.gather(*(worker() for _ in range(5)))

        assert peak == 1

    @pytest.mark.asyncio
    async def test_different_keys_run_concurrently(self):
        locks = KeyedLock()
        both_inside = asyncio.Event()
        inside = set()

        async def worker(key):
            async with locks.hold(key):
                inside.add(key)
                if len(inside) == 2:
                    both_inside.set()
                await asyncio.wait_for(both_inside.wait(), timeout=1)

        await asyncio.gather(worker("a"), worker("b"))

        assert inside == {"a", "b"}

    @pytest.mark.asyncio
    async def test_registry_drained_after_use(self):
        locks = KeyedLock()

        async with locks.hold("a"):
            assert len(locks) == 1

        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_lock_released_on_error(self):
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("a"):
                raise RuntimeError("boom")

        async with locks.hold("a"):
            pass
        assert len(locks) == 0
