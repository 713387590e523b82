"""Pytest configuration for CLI tests."""

from __future__ import annotations

import sys
import textwrap
from collections.abc import Generator
from pathlib import Path
from uuid import uuid4

import pytest
from click.testing import CliRunner

SUITE_SOURCE = """
from seqbench import Benchmark


class StepClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_bench():
    clock = StepClock()
    bench = Benchmark("sample", clock=clock)

    async def fast():
        clock.now += 2
        return 1

    async def slow():
        clock.now += 6
        return 2

    async def positive(result):
        return result > 0

    bench.schedule("fast", fast, positive)
    bench.schedule("warmup", fast, skip_recording=True)
    bench.schedule("slow", slow)
    return bench


def make_failing():
    bench = Benchmark("failing")

    async def operation():
        return 0

    async def never(result):
        return False

    bench.schedule("broken", operation, never)
    bench.schedule("after", operation)
    return bench


def make_broken():
    raise RuntimeError("no database")


bench = make_bench()
not_a_bench = 42
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create an isolated CLI test runner."""
    return CliRunner()


@pytest.fixture
def suite_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[str, None, None]:
    """Write an importable benchmark suite and return its module name."""
    name = f"suite_{uuid4().hex[:8]}"
    (tmp_path / f"{name}.py").write_text(textwrap.dedent(SUITE_SOURCE))
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.chdir(tmp_path)

    yield name

    sys.modules.pop(name, None)
