"""Tests for the awaiting paced iterator"""

import asyncio
import time
from collections.abc import AsyncIterator

import pytest

from ticker import EXHAUSTED, AsyncPacedIterator, Produced, TickerState, aticks

from helpers import FakeClock


def _paced(source, interval, clock: FakeClock) -> AsyncPacedIterator:
    return AsyncPacedIterator(source, interval, clock=clock, sleep=clock.async_sleep)


async def _numbers(n: int) -> AsyncIterator[int]:
    for i in range(n):
        yield i


class TestAsyncPacing:
    async def test_three_values_one_second_apart(self, clock: FakeClock):
        ticker = _paced([0, 1, 2], 1.0, clock)

        assert await ticker.request_next() == Produced(0)
        assert await ticker.request_next() == Produced(1)
        assert await ticker.request_next() == Produced(2)
        assert await ticker.request_next() is EXHAUSTED
        assert clock.sleeps == [1.0, 1.0]
        assert clock.now == 1002.0

    async def test_async_source(self, clock: FakeClock):
        ticker = _paced(_numbers(3), 0.5, clock)
        assert [i async for i in ticker] == [0, 1, 2]
        assert clock.sleeps == [0.5, 0.5]
        assert ticker.state is TickerState.EXHAUSTED

    async def test_sync_generator_source(self, clock: FakeClock):
        """Exhausting a sync generator inside a coroutine must not turn into RuntimeError"""
        ticker = _paced((c for c in "ab"), 0.1, clock)
        assert [c async for c in ticker] == ["a", "b"]

    async def test_zero_interval(self, clock: FakeClock):
        ticker = _paced(_numbers(10), 0, clock)
        assert [i async for i in ticker] == list(range(10))
        assert clock.sleeps == []

    async def test_stays_exhausted(self, clock: FakeClock):
        ticker = _paced([], 3.0, clock)
        for _ in range(3):
            assert await ticker.request_next() is EXHAUSTED
        with pytest.raises(StopAsyncIteration):
            await anext(ticker)
        assert clock.sleeps == []

    async def test_aticks(self, clock: FakeClock):
        counter = aticks(1.5, clock=clock, sleep=clock.async_sleep)
        assert [await anext(counter) for _ in range(3)] == [0, 1, 2]
        assert clock.sleeps == [1.5, 1.5]


class TestAsyncCancellation:
    async def test_cancelled_wait_keeps_value(self):
        ticker = AsyncPacedIterator([1, 2, 3], 0.2)
        assert await anext(ticker) == 1

        task = asyncio.create_task(anext(ticker))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert ticker.emitted == 1
        assert not ticker.exhausted
        assert ticker.remaining() > 0.1
        assert [v async for v in ticker] == [2, 3]


class TestAsyncWallClock:
    async def test_real_sleep_spacing(self):
        interval = 0.05
        emitted_at = []
        async for _ in AsyncPacedIterator(_numbers(4), interval):
            emitted_at.append(time.monotonic())

        gaps = [b - a for a, b in zip(emitted_at, emitted_at[1:])]
        assert all(gap >= interval - 0.005 for gap in gaps)
