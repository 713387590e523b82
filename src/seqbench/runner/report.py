"""Benchmark report model and rendering.

This module provides the BenchmarkResults model, which carries the mean
duration of every recorded test, and helpers for rendering it as JSON,
Markdown or a rich table.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import numpy as np
from pydantic import BaseModel, Field
from rich.table import Table

from seqbench.runner.case import BenchmarkTest

UNAVAILABLE = "unavailable"


def format_mean(durations: Sequence[float]) -> str:
    """Format the arithmetic mean of durations with three decimals.

    Args:
        durations: Recorded durations for one test name.

    Returns:
        The mean as a ``"D.DDD"`` string, or ``"unavailable"`` if empty.
    """
    if len(durations) == 0:
        return UNAVAILABLE
    return f"{float(np.mean(durations)):.3f}"


class BenchmarkResults(BaseModel):
    """Mean duration per recorded test, in registration order.

    Attributes:
        name: Name of the benchmark that produced the report.
        data: Test name to formatted mean duration or ``"unavailable"``.
    """

    name: str
    data: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_durations(
        cls,
        name: str,
        tests: Iterable[BenchmarkTest],
        durations: Mapping[str, Sequence[float]],
    ) -> BenchmarkResults:
        """Build a report from registered tests and their durations.

        Tests flagged ``skip_recording`` are left out entirely.

        Args:
            name: Benchmark name.
            tests: Registered tests, in registration order.
            durations: Recorded durations keyed by test name.

        Returns:
            BenchmarkResults for the current state.
        """
        data: dict[str, str] = {}
        for test in tests:
            if test.skip_recording:
                continue
            data[test.name] = format_mean(durations.get(test.name, []))
        return cls(name=name, data=data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{"name": ..., "data": {...}}`` wire shape."""
        return {"name": self.name, "data": dict(self.data)}

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON.

        Args:
            indent: None for a compact single line, or an indent width.

        Returns:
            JSON string.
        """
        if indent is None:
            return json.dumps(self.to_dict(), separators=(",", ":"))
        return json.dumps(self.to_dict(), indent=indent)

    def to_markdown(self) -> str:
        """Render the report as a Markdown table."""
        lines = [
            f"# Benchmark Results: {self.name}",
            "",
            "| Test | Mean Duration (ms) |",
            "|------|--------------------|",
        ]
        for test_name, mean in self.data.items():
            lines.append(f"| {test_name} | {mean} |")
        lines.append("")
        return "\n".join(lines)

    def to_table(self) -> Table:
        """Render the report as a rich table."""
        table = Table(title=f"Benchmark Results: {self.name}")
        table.add_column("Test", style="cyan")
        table.add_column("Mean Duration (ms)", justify="right")

        for test_name, mean in self.data.items():
            style = "yellow" if mean == UNAVAILABLE else None
            table.add_row(test_name, mean, style=style)

        return table

    def summary(self) -> str:
        """Generate a concise text summary."""
        lines = [
            "=" * 60,
            f"Benchmark: {self.name}",
            "=" * 60,
        ]
        width = max((len(test_name) for test_name in self.data), default=0)
        for test_name, mean in self.data.items():
            lines.append(f"  {test_name.ljust(width)}  {mean}")
        lines.append("=" * 60)
        return "\n".join(lines)
