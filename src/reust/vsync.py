"""Frame pacing for render loops."""

from __future__ import annotations

import asyncio
import time
from typing import Callable

__all__ = ["VSync", "frame_delay"]


def frame_delay(every: float, last: float | None, now: float) -> float:
    """Seconds to wait so ticks land roughly *every* seconds apart.

    A pass that overran its budget gets no wait rather than a negative one.
    """
    if last is None:
        return every
    elapsed = now - last
    if elapsed < every:
        return every - elapsed
    return 0.0


class VSync:
    """Sleeps between frames so the loop runs at a roughly fixed rate."""

    def __init__(
        self,
        every: float,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        if every < 0:
            raise ValueError("every must be >= 0")
        self._every = every
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._last: float | None = None

    @property
    def every(self) -> float:
        return self._every

    @property
    def last(self) -> float | None:
        """Timestamp of the last completed tick, ``None`` before the first."""
        return self._last

    def delay(self) -> float:
        return frame_delay(self._every, self._last, self._clock())

    def wait(self) -> None:
        to_wait = self.delay()
        if to_wait > 0:
            self._sleep(to_wait)
        self._last = self._clock()

    async def wait_async(self) -> None:
        # Always yields once so input readers get a turn even at 0 ms frames.
        await asyncio.sleep(self.delay())
        self._last = self._clock()
