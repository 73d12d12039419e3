"""
Iteration Module - Black Box Interface

Purpose: Process items one at a time with sync or async operations
Interface: sequential_process(), for_each_line()
Hidden: Copying, awaiting and short-circuit logic
"""

from .iteration import for_each_line, sequential_process

__all__ = ["for_each_line", "sequential_process"]
