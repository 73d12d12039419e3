"""
Timing Module - Black Box Interface

Purpose: Controllable waiting for work items and tests
Interface: delay(), BlockingFuture
Hidden: Timer scheduling, clock drift correction
"""

from .timing import BlockingFuture, delay

__all__ = ["BlockingFuture", "delay"]
