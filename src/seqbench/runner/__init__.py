"""seqbench runner package.

This module provides the sequential benchmark harness and the pieces it
is built from.

Core Components:
    - Benchmark: Schedules, runs and times asynchronous tests
    - run_sequentially: Ordered, abort-on-failure execution primitive
    - BenchmarkResults: Mean duration per test name
    - HarnessConfig: Configuration for a harness instance

Example:
    >>> import asyncio
    >>> from seqbench.runner import Benchmark
    >>>
    >>> bench = Benchmark("lookups")
    >>> bench.schedule("get", fetch_row, validator=row_exists)
    >>> results = asyncio.run(bench.run(repetitions=10))
    >>> print(results.to_json(indent=2))
"""

from seqbench.runner.case import (
    BenchmarkTest,
    always_valid,
)
from seqbench.runner.clock import (
    Clock,
    monotonic_ms,
)
from seqbench.runner.config import HarnessConfig
from seqbench.runner.errors import (
    SeqbenchError,
    TargetLoadError,
    ValidationFailure,
)
from seqbench.runner.harness import (
    Benchmark,
    ExecutionState,
)
from seqbench.runner.log import (
    ConsoleSink,
    LoggerSink,
    LogLevel,
    LogSink,
)
from seqbench.runner.report import (
    UNAVAILABLE,
    BenchmarkResults,
    format_mean,
)
from seqbench.runner.sequential import run_sequentially

__all__ = [
    # Harness
    "Benchmark",
    "BenchmarkTest",
    "ExecutionState",
    "always_valid",
    "run_sequentially",
    # Configuration
    "HarnessConfig",
    # Timing
    "Clock",
    "monotonic_ms",
    # Logging
    "ConsoleSink",
    "LoggerSink",
    "LogLevel",
    "LogSink",
    # Reporting
    "UNAVAILABLE",
    "BenchmarkResults",
    "format_mean",
    # Errors
    "SeqbenchError",
    "TargetLoadError",
    "ValidationFailure",
]
