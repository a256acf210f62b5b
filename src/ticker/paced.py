"""Paced iteration: re-emit a source's values at most once per interval.

A paced iterator wraps any iterable and blocks the consumer inside each
request so that two consecutive values are never handed out closer together
than the configured interval:

    for i in PacedIterator(range(10), 1.0):
        print(i)  # 0 immediately, then one number per second

The first request never waits. Each request pulls from the source first and
then sleeps out whatever is left of the interval, so an exhausted source is
reported without waiting and time spent producing a value counts towards the
interval. The emission timestamp is taken after the wait.
Once the source is exhausted the iterator stays exhausted without touching the
source or the clock again.

Single consumer only: there are no locks and no background timers.
"""

import asyncio
import itertools
import logging
import time
from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterable,
    Iterator,
)
from enum import Enum
from typing import Generic, TypeVar

from .results import EXHAUSTED, Exhausted, Produced
from .utils.validation import Interval, validate_interval

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

Clock = Callable[[], float]


class TickerState(str, Enum):
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class _Pacer(Generic[_T]):
    """Timing state shared by the sync and async iterators."""

    def __init__(self, interval: Interval, clock: Clock) -> None:
        self._interval = validate_interval(interval)
        self._clock = clock
        self._last_at: float | None = None
        self._state = TickerState.ACTIVE
        self._emitted = 0
        # Pulled from the source but not yet handed out; survives an interrupted wait.
        self._pending: Produced[_T] | None = None

    @property
    def interval(self) -> float:
        """Minimum spacing between emissions, in seconds."""
        return self._interval

    @property
    def state(self) -> TickerState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is TickerState.EXHAUSTED

    @property
    def emitted(self) -> int:
        """Number of values handed out so far."""
        return self._emitted

    def remaining(self) -> float:
        """Seconds the next request would block if made right now."""
        if self._last_at is None or self.exhausted:
            return 0.0
        return max(0.0, self._interval - (self._clock() - self._last_at))

    def _emit(self) -> Produced[_T]:
        assert self._pending is not None
        produced, self._pending = self._pending, None
        self._last_at = self._clock()
        self._emitted += 1
        return produced

    def _mark_exhausted(self) -> None:
        self._state = TickerState.EXHAUSTED
        logger.debug("Source exhausted after %d emissions", self._emitted)


class PacedIterator(_Pacer[_T]):
    """Rate limits an iterable, returning from ``next()`` at most once per interval."""

    def __init__(
        self,
        source: Iterable[_T],
        interval: Interval,
        *,
        clock: Clock = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(interval, clock)
        self._source: Iterator[_T] | None = iter(source)
        self._sleep = sleep

    def request_next(self) -> Produced[_T] | Exhausted:
        if self._source is None:
            return EXHAUSTED

        if self._pending is None:
            try:
                self._pending = Produced(next(self._source))
            except StopIteration:
                self._source = None
                self._mark_exhausted()
                return EXHAUSTED

        if (wait := self.remaining()) > 0:
            logger.debug("Waiting %.3fs before next emission", wait)
            self._sleep(wait)

        return self._emit()

    def __iter__(self) -> "PacedIterator[_T]":
        return self

    def __next__(self) -> _T:
        match self.request_next():
            case Produced(value):
                return value
            case _:
                raise StopIteration


class AsyncPacedIterator(_Pacer[_T]):
    """Async twin of :class:`PacedIterator`: the wait is an awaited sleep.

    Accepts sync or async sources. Cancelling the awaiting task interrupts the
    wait; the value already pulled is kept and returned by the next request.
    """

    def __init__(
        self,
        source: Iterable[_T] | AsyncIterable[_T],
        interval: Interval,
        *,
        clock: Clock = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        super().__init__(interval, clock)
        self._source: Iterator[_T] | AsyncIterator[_T] | None = (
            aiter(source) if isinstance(source, AsyncIterable) else iter(source)
        )
        self._sleep = sleep

    async def request_next(self) -> Produced[_T] | Exhausted:
        if self._source is None:
            return EXHAUSTED

        if self._pending is None:
            try:
                if isinstance(self._source, AsyncIterator):
                    self._pending = Produced(await anext(self._source))
                else:
                    # next() stays inline: StopIteration must not escape a coroutine frame
                    self._pending = Produced(next(self._source))
            except (StopIteration, StopAsyncIteration):
                self._source = None
                self._mark_exhausted()
                return EXHAUSTED

        if (wait := self.remaining()) > 0:
            logger.debug("Waiting %.3fs before next emission", wait)
            await self._sleep(wait)

        return self._emit()

    def __aiter__(self) -> "AsyncPacedIterator[_T]":
        return self

    async def __anext__(self) -> _T:
        match await self.request_next():
            case Produced(value):
                return value
            case _:
                raise StopAsyncIteration


def ticks(
    interval: Interval,
    *,
    start: int = 0,
    clock: Clock = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> PacedIterator[int]:
    """Count up from ``start`` forever, one number per interval.

    Run some function every second:

        for _ in ticks(1.0):
            somefunc()
    """
    return PacedIterator(itertools.count(start), interval, clock=clock, sleep=sleep)


def aticks(
    interval: Interval,
    *,
    start: int = 0,
    clock: Clock = time.monotonic,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> AsyncPacedIterator[int]:
    """Async version of :func:`ticks`."""
    return AsyncPacedIterator(
        itertools.count(start), interval, clock=clock, sleep=sleep
    )
