"""Sequential benchmark harness.

This module provides the Benchmark class, which runs registered
asynchronous tests in a fixed order across repetitions, times every
execution and reports the mean duration per test name.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from seqbench.runner.case import BenchmarkTest, Operation, Validator, always_valid
from seqbench.runner.clock import Clock, monotonic_ms
from seqbench.runner.config import HarnessConfig
from seqbench.runner.errors import ValidationFailure
from seqbench.runner.log import LoggerSink, LogLevel, LogSink
from seqbench.runner.report import BenchmarkResults
from seqbench.runner.sequential import run_sequentially

logger = logging.getLogger(__name__)

Hook = Callable[[], Awaitable[Any]]


async def _noop() -> None:
    return None


class ExecutionState(str, Enum):
    """State of a benchmark harness.

    Attributes:
        IDLE: No run in flight; the last run (if any) succeeded.
        RUNNING: A run is in flight.
        FAILED: The last run stopped on an error.
    """

    IDLE = "idle"
    RUNNING = "running"
    FAILED = "failed"


class Benchmark:
    """Runs asynchronous tests in registration order and times them.

    Each repetition awaits ``set_up``, then every scheduled test, then
    ``tear_down``, strictly one step at a time. Any exception stops the run
    at once: no further tests or repetitions execute and the exception
    propagates unchanged. Test results are validated on the first
    repetition only; later repetitions just measure timing.

    Durations accumulate per test name for the lifetime of the instance,
    including across failed runs and repeated ``run`` calls. Use a fresh
    instance for every independent measurement campaign. Concurrent
    ``run`` calls on one instance are not supported and must be
    serialized by the caller.

    Example:
        >>> bench = Benchmark("inserts", set_up=db.open, tear_down=db.close)
        >>> bench.schedule("insert_100", insert_rows, validator=check_rows)
        >>> results = await bench.run(repetitions=5)
        >>> print(results.data["insert_100"])
    """

    def __init__(
        self,
        name: str,
        set_up: Hook | None = None,
        tear_down: Hook | None = None,
        *,
        log_level: LogLevel | int | str = LogLevel.INFO,
        sink: LogSink | None = None,
        clock: Clock | None = None,
        warn_duplicate_names: bool = False,
    ) -> None:
        """Initialize the harness.

        Args:
            name: Benchmark name, echoed in the report.
            set_up: Coroutine function awaited before each repetition.
            tear_down: Coroutine function awaited after each repetition.
            log_level: Minimum severity passed on to the sink.
            sink: Destination for log lines (stdlib logging by default).
            clock: Monotonic clock returning milliseconds.
            warn_duplicate_names: Warn when a test name is scheduled twice.
        """
        self.name = name
        self._set_up = set_up or _noop
        self._tear_down = tear_down or _noop
        self.log_level = LogLevel.parse(log_level)
        self.sink = sink or LoggerSink(logger)
        self.clock = clock or monotonic_ms
        self.warn_duplicate_names = warn_duplicate_names

        self.state = ExecutionState.IDLE
        self._tests: list[BenchmarkTest] = []
        self._durations: dict[str, list[float]] = {}
        self._current_repetition = 0

    @classmethod
    def from_config(
        cls,
        config: HarnessConfig,
        set_up: Hook | None = None,
        tear_down: Hook | None = None,
        **kwargs: Any,
    ) -> Benchmark:
        """Create a harness from a HarnessConfig.

        Args:
            config: Harness configuration.
            set_up: Coroutine function awaited before each repetition.
            tear_down: Coroutine function awaited after each repetition.
            **kwargs: Extra keyword arguments for the constructor.

        Returns:
            Configured Benchmark.
        """
        return cls(
            config.name,
            set_up,
            tear_down,
            log_level=config.log_level,
            warn_duplicate_names=config.warn_duplicate_names,
            **kwargs,
        )

    @property
    def tests(self) -> tuple[BenchmarkTest, ...]:
        """Scheduled tests in registration order."""
        return tuple(self._tests)

    @property
    def current_repetition(self) -> int:
        """Number of repetitions started so far."""
        return self._current_repetition

    def schedule(
        self,
        name: str,
        operation: Operation,
        validator: Validator | None = None,
        skip_recording: bool = False,
    ) -> None:
        """Append a test to the schedule.

        Args:
            name: Test name; not required to be unique.
            operation: Zero-argument coroutine function to time.
            validator: Async predicate over the operation's result.
            skip_recording: Exclude this test from timing and the report.
        """
        if self.warn_duplicate_names and any(t.name == name for t in self._tests):
            self._log(
                LogLevel.WARNING,
                "DUPLICATE:",
                name,
                "is already scheduled; durations will be merged",
            )

        self._tests.append(
            BenchmarkTest(
                name=name,
                operation=operation,
                validator=validator or always_valid,
                skip_recording=skip_recording,
            )
        )

    async def run(self, repetitions: int = 1) -> BenchmarkResults:
        """Run the full schedule ``repetitions`` times.

        Unlike a falsy-default count, zero and negative values are not
        coerced to a single repetition; they are rejected outright.

        Args:
            repetitions: Number of ``set_up``/tests/``tear_down`` passes.

        Returns:
            BenchmarkResults with the mean duration of every recorded test.

        Raises:
            ValueError: If repetitions is less than 1.
            ValidationFailure: If a first-repetition validator rejects a result.
        """
        if repetitions < 1:
            raise ValueError(f"repetitions must be at least 1, got {repetitions}")

        self.state = ExecutionState.RUNNING
        try:
            await run_sequentially([self._run_repetition] * repetitions)
        except BaseException as e:
            # Cancellation must not leave the harness RUNNING.
            self.state = ExecutionState.FAILED
            self._log(LogLevel.ERROR, "RUN FAILED:", str(e) or type(e).__name__)
            raise

        self.state = ExecutionState.IDLE
        results = self.get_results()
        self._log(LogLevel.INFO, "RESULT:", results.to_json())
        self._log(LogLevel.FINE, "RESULT:", results.to_json(indent=2))
        return results

    def get_results(self) -> BenchmarkResults:
        """Report the durations recorded so far.

        Safe to call at any time, including mid-run and after a failure.
        """
        return BenchmarkResults.from_durations(self.name, self._tests, self._durations)

    def get_durations(self, name: str) -> list[float]:
        """Return a copy of the durations recorded under ``name``."""
        return list(self._durations.get(name, []))

    def _log(self, level: LogLevel, *values: Any) -> None:
        if level < self.log_level:
            return
        try:
            self.sink(level, *values)
        except Exception as e:
            logger.warning(f"Log sink error: {e}")

    async def _run_repetition(self) -> None:
        self._current_repetition += 1
        self._log(LogLevel.FINE, "REPETITION:", self._current_repetition)

        steps: list[Hook] = [self._set_up]
        steps.extend(self._bind(test) for test in self._tests)
        steps.append(self._tear_down)
        await run_sequentially(steps)

    def _bind(self, test: BenchmarkTest) -> Hook:
        async def step() -> None:
            await self._run_one_test(test)

        return step

    async def _run_one_test(self, test: BenchmarkTest) -> None:
        """Run a single test, time it, and validate its result."""
        self._log(LogLevel.FINE, "\n----------Running", test.name, "------------")
        start = self.clock()
        result = await test.operation()
        duration = self.clock() - start

        # Recorded before validation so a rejected result keeps its sample.
        if not test.skip_recording:
            self._durations.setdefault(test.name, []).append(duration)

        if self._current_repetition > 1:
            validated = True
        else:
            validated = await test.validator(result)

        if not validated:
            self._log(LogLevel.FINE, "FAILED", test.name)
            raise ValidationFailure(test.name)

        self._log(LogLevel.FINE, "PASSED", test.name, ":", duration)
