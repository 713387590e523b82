"""Registered benchmark tests.

A BenchmarkTest pairs an asynchronous operation with the validator that
judges its result. Tests are created by ``Benchmark.schedule`` and never
change afterwards.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

Operation = Callable[[], Awaitable[Any]]
Validator = Callable[[Any], Awaitable[bool]]


async def always_valid(result: Any) -> bool:
    """Default validator: accepts any result."""
    return True


@dataclass(frozen=True)
class BenchmarkTest:
    """A single scheduled test.

    Attributes:
        name: Name used for logging and as the aggregation key. Several
            tests may share a name, in which case they share durations.
        operation: Zero-argument coroutine function exercising the subject.
        validator: Async predicate over the operation's result.
        skip_recording: Exclude this test from timing and reporting.
    """

    name: str
    operation: Operation
    validator: Validator = field(default=always_valid)
    skip_recording: bool = False

    @property
    def has_custom_validator(self) -> bool:
        """Whether a validator other than the default was supplied."""
        return self.validator is not always_valid
