import asyncio
import pytest

from account_service.core.locks import KeyedLock

pytestmark = pytest.mark.asyncio


async def test_same_key_is_serialized():
    locks = KeyedLock()
    events = []

    async def worker(name):
        async with locks.hold(1):
            events.append(f"{name}-in")
            await asyncio.sleep(0.01)
            events.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))

    assert events in (
        ["a-in", "a-out", "b-in", "b-out"],
        ["b-in", "b-out", "a-in", "a-out"],
    )


async def test_different_keys_run_concurrently():
    locks = KeyedLock()
    first_inside = asyncio.Event()
    second_inside = asyncio.Event()

    async def first():
        async with locks.hold(1):
            first_inside.set()
            await asyncio.wait_for(second_inside.wait(), timeout=1)

    async def second():
        await first_inside.wait()
        async with locks.hold(2):
            second_inside.set()

    await asyncio.gather(first(), second())


async def test_lock_is_dropped_after_release():
    locks = KeyedLock()

    async with locks.hold("acc"):
        assert "acc" in locks

    assert "acc" not in locks
    assert len(locks) == 0


async def test_lock_is_released_on_error():
    locks = KeyedLock()

    with pytest.raises(RuntimeError):
        async with locks.hold(7):
            raise RuntimeError("boom")

    assert len(locks) == 0
    async with locks.hold(7):
        pass
