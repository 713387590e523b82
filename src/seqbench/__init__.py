"""seqbench: ordered, instrumented runs of asynchronous benchmark steps.

Register named coroutine functions with optional validators, run them in
strict order across repetitions, and collect the mean duration of each.

Example:
    >>> import asyncio
    >>> from seqbench import Benchmark
    >>> bench = Benchmark("subject", set_up=connect, tear_down=disconnect)
    >>> bench.schedule("insert", insert_rows, validator=rows_inserted)
    >>> results = asyncio.run(bench.run(repetitions=3))
    >>> print(results.data)
"""

# isort: skip_file

from seqbench.runner.harness import Benchmark, ExecutionState
from seqbench.runner.case import BenchmarkTest, always_valid
from seqbench.runner.config import HarnessConfig
from seqbench.runner.errors import SeqbenchError, TargetLoadError, ValidationFailure
from seqbench.runner.log import ConsoleSink, LoggerSink, LogLevel, LogSink
from seqbench.runner.report import UNAVAILABLE, BenchmarkResults
from seqbench.runner.sequential import run_sequentially
from seqbench.version import __version__

__all__ = [
    "__version__",
    "Benchmark",
    "BenchmarkTest",
    "ExecutionState",
    "always_valid",
    "run_sequentially",
    "HarnessConfig",
    "ConsoleSink",
    "LoggerSink",
    "LogLevel",
    "LogSink",
    "UNAVAILABLE",
    "BenchmarkResults",
    "SeqbenchError",
    "TargetLoadError",
    "ValidationFailure",
]
