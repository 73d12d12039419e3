"""
Shared pytest fixtures for keyqueue tests.

This module provides common fixtures including:
- WorkRecorder: Build work items that record when they start and finish
- A fresh KeyedSequencer per test
- Environment isolation for config tests
"""

import asyncio
import os
import sys
from dataclasses import dataclass, field
from typing import Any, List, Tuple

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from keyqueue.config import reset_config
from keyqueue.modules.sequencer import KeyedSequencer, reset_sequencer


# =============================================================================
# Work Recording Infrastructure
# =============================================================================

@dataclass
class WorkRecorder:
    """
    Records start/finish events of work items in the order they happen.

    Usage:
        def test_order(sequencer, recorder):
            sequencer.submit("k", recorder.work("a", delay=0.02))
            sequencer.submit("k", recorder.work("b"))
            ...
            assert recorder.events == [("start", "a"), ("end", "a"), ...]
    """
    events: List[Tuple[str, str]] = field(default_factory=list)

    def work(self, name: str, delay: float = 0, result: Any = None, error: BaseException = None):
        """Coroutine function that sleeps for delay seconds, then returns or raises."""
        async def _work():
            self.events.append(("start", name))
            await asyncio.sleep(delay)
            self.events.append(("end", name))
            if error is not None:
                raise error
            return name if result is None else result

        return _work

    def started(self) -> List[str]:
        return [name for kind, name in self.events if kind == "start"]


@pytest.fixture
def recorder():
    """Fresh WorkRecorder."""
    return WorkRecorder()


@pytest.fixture
def sequencer():
    """Fresh, isolated KeyedSequencer."""
    return KeyedSequencer()


# =============================================================================
# Environment Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip keyqueue settings from the environment and drop cached singletons."""
    for name in ("KEYQUEUE_LOG_LEVEL", "KEYQUEUE_DEBUG", "KEYQUEUE_DEPTH_WARNING"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_sequencer()
    yield
    reset_config()
    reset_sequencer()
