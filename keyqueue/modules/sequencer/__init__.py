"""
Sequencer Module - Black Box Interface

Purpose: Run asynchronous work one item at a time per key, in submission order
Interface: submit(), length(), handles(), keys(), get_sequencer()
Hidden: Registry layout, handle bookkeeping, cleanup chaining

Single-process and in-memory; bound to the running asyncio event loop.
"""

from .sequencer import KeyedSequencer, KeyQueue, get_sequencer, reset_sequencer

__all__ = ["KeyedSequencer", "KeyQueue", "get_sequencer", "reset_sequencer"]
