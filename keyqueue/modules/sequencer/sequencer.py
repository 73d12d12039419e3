"""
Keyed Sequencer

Runs asynchronous work one item at a time per key. Work submitted under the
same key executes strictly in submission order, each item starting only once
the previous one has settled; work under different keys runs independently.

Design Principles:
- Future chaining only: every submission waits on the current tail handle
- Self-cleaning: a settled task removes its own handle, idle keys disappear
- Transparent: callers observe exactly the outcome of their own work
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional, Tuple

from keyqueue.config import SequencerConfig, get_config
from keyqueue.errors import SequencerInvariantError

logger = logging.getLogger("keyqueue.sequencer")


@dataclass
class KeyQueue:
    """
    Outstanding task handles for a single key.

    Handles are stored under a per-key sequence number; dict insertion order
    is submission order.
    """

    next_seq: int = 0
    handles: Dict[int, asyncio.Future] = field(default_factory=dict)

    def tail(self) -> Optional[asyncio.Future]:
        """Most recently queued handle, or None when the queue is idle."""
        if not self.handles:
            return None
        return self.handles[next(reversed(self.handles))]

    def reserve(self) -> int:
        """Allocate the sequence number for the next handle."""
        seq = self.next_seq
        self.next_seq += 1
        return seq


class KeyedSequencer:
    def __init__(self, depth_warning: Optional[int] = None):
        """
        Initialize sequencer.

        Args:
            depth_warning: Log a warning when a key's queue reaches this depth
        """
        self.depth_warning = depth_warning
        self._registry: Dict[Hashable, KeyQueue] = {}

    @classmethod
    def from_config(cls, config: SequencerConfig) -> "KeyedSequencer":
        """Create a sequencer from a SequencerConfig."""
        return cls(depth_warning=config.depth_warning)

    def submit(self, key: Hashable, work: Any = None, *, pass_wait_time: bool = False) -> asyncio.Task:
        """
        Queue work behind everything still outstanding for key.

        Args:
            key: Queue identifier, any hashable value
            work: Callable (sync or async), awaitable, or plain value. Non-callables
                are awaited if awaitable and resolve to themselves otherwise, so
                an existing future can be queued as a barrier.
            pass_wait_time: Call work with the milliseconds spent waiting for its turn

        Returns:
            Task resolving to work's result or raising work's exception. By the
            time it completes, the task's handle has been removed from the queue.

        Logic:
        1. Lazily create the key's queue
        2. Chain the work behind the current tail handle
        3. Chain a cleanup handle behind the work and push it as the new tail
        4. Hand back a task that waits for cleanup, then mirrors the work's outcome
        """
        loop = asyncio.get_running_loop()

        queue = self._registry.get(key)
        if queue is None:
            queue = self._registry[key] = KeyQueue()

        tail = queue.tail()
        seq = queue.reserve()
        result = loop.create_task(self._run(work, tail, loop.time(), pass_wait_time))
        handle = loop.create_task(self._settle(key, queue, seq, result))
        queue.handles[seq] = handle

        depth = len(queue.handles)
        logger.debug(f"Queued task {seq} (depth {depth})", extra={"queue_key": key})
        if self.depth_warning is not None and depth == self.depth_warning:
            logger.warning(
                f"Worker queue for {key!r} reached depth {depth}",
                extra={"queue_key": key},
            )

        return loop.create_task(self._deliver(result, handle))

    def length(self, key: Hashable) -> int:
        """
        Number of outstanding handles for key.

        Never creates a registry entry.
        """
        queue = self._registry.get(key)
        return len(queue.handles) if queue is not None else 0

    def handles(self, key: Hashable) -> Tuple[asyncio.Future, ...]:
        """
        Snapshot of the outstanding handles for key, oldest first.

        Each entry is a shielded view: awaiting it waits for that task's
        cleanup, cancelling it leaves the queue untouched.
        """
        queue = self._registry.get(key)
        if queue is None:
            return ()
        return tuple(asyncio.shield(handle) for handle in queue.handles.values())

    def keys(self) -> Tuple[Hashable, ...]:
        """Snapshot of keys with outstanding work."""
        return tuple(self._registry)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._registry

    async def _run(
        self, work: Any, tail: Optional[asyncio.Future], started_at: float, pass_wait_time: bool
    ) -> Any:
        if tail is not None:
            # Wait for settlement only; the previous outcome is not ours
            await asyncio.wait((tail,))

        waited_ms = (asyncio.get_running_loop().time() - started_at) * 1000
        if callable(work):
            outcome = work(waited_ms) if pass_wait_time else work()
        else:
            outcome = work

        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome

    async def _settle(self, key: Hashable, queue: KeyQueue, seq: int, result: asyncio.Task) -> bool:
        # asyncio.wait never raises the work's exception, so cleanup always runs
        await asyncio.wait((result,))

        if queue.handles.pop(seq, None) is None:
            logger.critical(
                f"Task {seq} missing from worker queue {key!r}",
                extra={"queue_key": key},
            )
            raise SequencerInvariantError(key, seq)

        if not queue.handles and self._registry.get(key) is queue:
            del self._registry[key]

        logger.debug(
            f"Settled task {seq} ({len(queue.handles)} remaining)",
            extra={"queue_key": key},
        )
        return True

    @staticmethod
    async def _deliver(result: asyncio.Task, handle: asyncio.Task) -> Any:
        # Waiting through asyncio.wait keeps a cancelled caller from cancelling
        # the cleanup handle the rest of the queue depends on.
        await asyncio.wait((handle,))
        handle.result()
        return result.result()


# Process-wide default instance
_instance: Optional[KeyedSequencer] = None


def get_sequencer() -> KeyedSequencer:
    """Get the default sequencer, configured from the environment."""
    global _instance
    if _instance is None:
        _instance = KeyedSequencer.from_config(get_config())
    return _instance


def reset_sequencer() -> None:
    """Drop the default sequencer; the next get_sequencer() builds a fresh one."""
    global _instance
    _instance = None
