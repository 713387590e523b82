"""Ordered execution of asynchronous operations.

The harness uses this primitive both for the steps inside one repetition
and for chaining repetitions, so a failure anywhere ends the whole run.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any

AsyncOperation = Callable[[], Awaitable[Any]]


async def run_sequentially(operations: Iterable[AsyncOperation]) -> None:
    """Await each operation in order, one at a time.

    Operation ``i + 1`` is only invoked after the awaitable returned by
    operation ``i`` completed successfully. The first exception stops the
    sequence and propagates unchanged; later operations are never called.

    Args:
        operations: Zero-argument callables returning awaitables.
    """
    for operation in operations:
        await operation()
