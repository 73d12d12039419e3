"""
Sequential iteration over items with a possibly asynchronous operation.
"""

import inspect
import logging
import re
from typing import Any, Callable, Iterable

logger = logging.getLogger("keyqueue.iteration")

_LINE_PATTERN = re.compile(r"[^\r\n]+")


async def sequential_process(items: Iterable[Any], op: Callable[[Any], Any]) -> bool:
    """
    Run op on every item, strictly one at a time and in order.

    Args:
        items: Items to process; a shallow copy is taken, the input is never mutated
        op: Called with one item; may return an awaitable, which is awaited
            before the next item starts

    Returns:
        True once every item has been processed

    Raises:
        The first exception raised by op; remaining items are skipped
    """
    pending = list(items)
    for index, item in enumerate(pending):
        try:
            outcome = op(item)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            logger.debug(f"Stopped at item {index} of {len(pending)}: {e!r}")
            raise
    return True


async def for_each_line(text: str, op: Callable[[str], Any]) -> bool:
    """Run op sequentially on each non-empty line of text."""
    return await sequential_process(_LINE_PATTERN.findall(text), op)
