"""
Unit tests for the coroutine reader/writer lock.
"""

import asyncio

import pytest

from todo_tracker.utils.locks import ReadWriteLock


@pytest.mark.asyncio
async def test_readers_share_the_lock():
    lock = ReadWriteLock()

    async with lock.read():
        async with lock.read():
            assert lock.readers == 2
        assert lock.readers == 1

    assert lock.readers == 0


@pytest.mark.asyncio
async def test_writer_blocks_readers():
    lock = ReadWriteLock()
    events = []

    async def writer():
        async with lock.write():
            events.append("write start")
            await asyncio.sleep(0.01)
            events.append("write end")

    async def reader():
        await asyncio.sleep(0)
        async with lock.read():
            events.append("read")

    await asyncio.gather(writer(), reader())

    assert events == ["write start", "write end", "read"]


@pytest.mark.asyncio
async def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    events = []

    async def reader():
        async with lock.read():
            events.append("read start")
            await asyncio.sleep(0.01)
            events.append("read end")

    async def writer():
        await asyncio.sleep(0)
        async with lock.write():
            assert lock.readers == 0
            events.append("write")

    await asyncio.gather(reader(), writer())

    assert events == ["read start", "read end", "write"]


@pytest.mark.asyncio
async def test_writers_are_exclusive():
    lock = ReadWriteLock()
    active = 0
    peak = 0

    async def writer():
        nonlocal active, peak
        async with lock.write():
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0)
            active -= 1

    await asyncio.gather(*(writer() for _ in range(5)))

    assert peak == 1
    assert not lock.writing


@pytest.mark.asyncio
async def test_lock_is_released_on_error():
    lock = ReadWriteLock()

    with pytest.raises(RuntimeError):
        async with lock.write():
            raise RuntimeError("boom")

    assert not lock.writing
    async with lock.read():
        assert lock.readers == 1


@pytest.mark.asyncio
async def test_waiting_writer_goes_before_new_readers():
    lock = ReadWriteLock()
    events = []

    async def first_reader():
        async with lock.read():
            events.append("read 1 start")
            await asyncio.sleep(0.01)
            events.append("read 1 end")

    async def writer():
        await asyncio.sleep(0)
        async with lock.write():
            events.append("write")

    async def second_reader():
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert lock.waiting_writers == 1
        async with lock.read():
            events.append("read 2")

    await asyncio.gather(first_reader(), writer(), second_reader())

    assert events == ["read 1 start", "read 1 end", "write", "read 2"]


@pytest.mark.asyncio
async def test_cancelled_writer_lets_readers_in():
    lock = ReadWriteLock()

    async with lock.read():
        waiting = asyncio.ensure_future(lock.write().__aenter__())
        await asyncio.sleep(0)
        assert lock.waiting_writers == 1

        waiting.cancel()
        with pytest.raises(asyncio.CancelledError):
            await waiting

        assert lock.waiting_writers == 0
        async with lock.read():
            assert lock.readers == 2
