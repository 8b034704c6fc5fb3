import asyncio

import pytest

from todoserver.repositories.locks import ReadWriteLock

pytestmark = pytest.mark.anyio


async def test_readers_share_the_lock():
    lock = ReadWriteLock()
    async with lock.read():
        async with lock.read():
            assert lock.readers == 2
    assert lock.readers == 0

async def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []

    async def reader():
        async with lock.read():
            events.append("read")

    async with lock.write():
        assert lock.writer_active
        task = asyncio.create_task(reader())
        await asyncio.sleep(0.01)
        assert events == []

    await task
    assert events == ["read"]
    assert not lock.writer_active

async def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    events = []

    async def writer():
        async with lock.write():
            events.append("write")

    async with lock.read():
        task = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        assert events == []

    await task
    assert events == ["write"]

async def test_waiting_writer_goes_before_later_readers():
    lock = ReadWriteLock()
    events = []

    async def writer():
        async with lock.write():
            events.append("write")

    async def late_reader():
        async with lock.read():
            events.append("read")

    async with lock.read():
        w = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        r = asyncio.create_task(late_reader())
        await asyncio.sleep(0.01)
        assert events == []

    await asyncio.gather(w, r)
    assert events == ["write", "read"]

async def test_cancelled_writer_releases_queued_readers():
    lock = ReadWriteLock()
    events = []

    async def writer():
        async with lock.write():
            events.append("write")

    async def late_reader():
        async with lock.read():
            events.append("read")

    async with lock.read():
        w = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        r = asyncio.create_task(late_reader())
        await asyncio.sleep(0.01)

        w.cancel()
        await asyncio.gather(w, return_exceptions=True)
        await asyncio.wait_for(r, timeout=1)

    assert events == ["read"]

async def test_lock_released_on_error():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        async with lock.write():
            raise RuntimeError("boom")

    async with lock.read():
        assert lock.readers == 1
