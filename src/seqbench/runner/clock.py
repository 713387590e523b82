"""Clock sources used to time benchmark steps."""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Return a monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000
