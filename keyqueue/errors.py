"""
Error types shared across keyqueue modules.

Every error raised by the package derives from KeyQueueError so callers can
catch package failures in one place. Failures raised by submitted work are
never wrapped: they reach the caller unchanged.
"""

from typing import Any


class KeyQueueError(Exception):
    """Base class for keyqueue errors."""


class SequencerInvariantError(KeyQueueError, RuntimeError):
    """A settled task could not find its own handle in its key's queue."""

    def __init__(self, key: Any, seq: int):
        self.key = key
        self.seq = seq
        super().__init__(f"Could not self-remove task {seq} from worker queue {key!r}")


class ConfigurationError(KeyQueueError, ValueError):
    """Invalid configuration value."""


class MethodDispatchError(KeyQueueError, AttributeError):
    """A dotted method path could not be resolved to something callable."""

    def __init__(self, function_name: str):
        self.function_name = function_name
        super().__init__(f"Unable to execute {function_name} on the object provided.")
