"""
Timing helpers: a measured delay and a manually settled future.
"""

import asyncio
import logging
import math
from typing import Any, Optional

logger = logging.getLogger("keyqueue.timing")


def delay(duration_ms: float, loop: Optional[asyncio.AbstractEventLoop] = None) -> asyncio.Future:
    """
    Future fulfilled after at least duration_ms have elapsed.

    Args:
        duration_ms: Minimum wait in milliseconds; negative values wait zero
        loop: Event loop to schedule on (defaults to the running loop)

    Returns:
        Future resolving to the elapsed milliseconds as measured by the loop
        clock. Timer setup errors reject the future instead of raising here.
    """
    loop = loop or asyncio.get_running_loop()
    future = loop.create_future()
    started_at = loop.time()

    def _fire(duration: float) -> None:
        if future.done():
            return
        elapsed = (loop.time() - started_at) * 1000
        # call_later may fire up to one clock tick early
        if elapsed < duration:
            loop.call_later((duration - elapsed) / 1000, _fire, duration)
            return
        future.set_result(elapsed)

    try:
        duration = float(duration_ms)
        if not math.isfinite(duration):
            raise ValueError(f"Delay must be a finite number of milliseconds, got {duration_ms!r}")
        duration = max(duration, 0.0)
        loop.call_later(duration / 1000, _fire, duration)
    except Exception as e:
        logger.error(f"Failed to schedule delay of {duration_ms!r}ms: {e}")
        future.set_exception(e)

    return future


class BlockingFuture:
    """
    Exposes the settle methods of a future.

    The future itself is available as .future. Useful for holding a worker
    queue closed until some outside event happens.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.future: asyncio.Future = (loop or asyncio.get_running_loop()).create_future()

    def resolve(self, value: Any = None) -> None:
        """Fulfill the future; ignored once settled."""
        if not self.future.done():
            self.future.set_result(value)

    def reject(self, error: BaseException) -> None:
        """Fail the future with error; ignored once settled."""
        if not self.future.done():
            self.future.set_exception(error)

    @property
    def settled(self) -> bool:
        return self.future.done()

    def __await__(self):
        return self.future.__await__()
