"""Severity levels and output sinks for harness logging.

The harness filters messages against its own threshold and hands the
surviving ones to a sink. Sinks are line-oriented writers: each call
receives the message severity followed by an arbitrary sequence of
loggable values, which are rendered space-separated on one line.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Protocol

from rich.console import Console


class LogLevel(IntEnum):
    """Harness log severities, most to least verbose.

    Attributes:
        FINE: Per-repetition and per-test progress markers.
        INFO: Final compact report (default threshold).
        WARNING: Suspicious but non-fatal conditions.
        ERROR: Failures.
    """

    FINE = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @classmethod
    def parse(cls, value: LogLevel | int | str) -> LogLevel:
        """Coerce a level name or ordinal into a LogLevel.

        Args:
            value: A LogLevel, its integer ordinal, or its name in any case.

        Returns:
            The matching LogLevel.

        Raises:
            ValueError: If the value names no level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                allowed = ", ".join(level.name.lower() for level in cls)
                raise ValueError(f"Unknown log level '{value}', expected one of: {allowed}") from None
        return cls(value)

    @property
    def stdlib_level(self) -> int:
        """Equivalent level in the standard ``logging`` module."""
        return _STDLIB_LEVELS[self]


_STDLIB_LEVELS = {
    LogLevel.FINE: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class LogSink(Protocol):
    """Protocol for harness log sinks."""

    def __call__(self, level: LogLevel, *values: Any) -> None:
        """Write one line made of ``values``.

        Args:
            level: Severity of the message (already past the threshold).
            *values: Items to render, separated by single spaces.
        """
        ...


def format_line(*values: Any) -> str:
    """Render values the way the sinks print them."""
    return " ".join(str(value) for value in values)


class LoggerSink:
    """Forward harness lines to a standard library logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def __call__(self, level: LogLevel, *values: Any) -> None:
        self.logger.log(level.stdlib_level, format_line(*values))


class ConsoleSink:
    """Print harness lines to a rich console."""

    STYLES = {
        LogLevel.FINE: "dim",
        LogLevel.INFO: "",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "bold red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def __call__(self, level: LogLevel, *values: Any) -> None:
        # Report lines are JSON, so rich markup must stay off.
        self.console.print(
            format_line(*values),
            style=self.STYLES[level] or None,
            markup=False,
            highlight=False,
        )
