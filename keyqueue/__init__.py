"""
keyqueue - Per-key Sequential Task Queue

Runs asynchronous work one item at a time per key, in submission order,
on a single asyncio event loop.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- sequencer: Keyed worker queues and their bookkeeping
- timing: Measured delays and manually settled futures
- iteration: Sequential processing of items and lines
- objects: Deep copy, method dispatch and cycle-tolerant JSON
"""

from keyqueue.errors import (
    ConfigurationError,
    KeyQueueError,
    MethodDispatchError,
    SequencerInvariantError,
)
from keyqueue.modules.iteration import for_each_line, sequential_process
from keyqueue.modules.objects import deep_copy, execute_method, stringify_exclude_seen
from keyqueue.modules.sequencer import KeyedSequencer, get_sequencer, reset_sequencer
from keyqueue.modules.timing import BlockingFuture, delay

__version__ = "1.0.0"

__all__ = [
    "BlockingFuture",
    "ConfigurationError",
    "KeyQueueError",
    "KeyedSequencer",
    "MethodDispatchError",
    "SequencerInvariantError",
    "deep_copy",
    "delay",
    "execute_method",
    "for_each_line",
    "get_sequencer",
    "reset_sequencer",
    "sequential_process",
    "stringify_exclude_seen",
]
