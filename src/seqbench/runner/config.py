"""Configuration for the benchmark harness.

This module defines the options that control a harness instance: its name,
default repetition count, log threshold and duplicate-name checking.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from seqbench.runner.log import LogLevel


class HarnessConfig(BaseModel):
    """Configuration for a Benchmark.

    Attributes:
        name: Benchmark name, reported as the report's ``name``.
        repetitions: Default number of repetitions for a run.
        log_level: Minimum severity the harness emits.
        warn_duplicate_names: Log a warning when a test name is scheduled
            twice. Aggregation by name is unaffected.
    """

    name: str = "benchmark"
    repetitions: int = Field(default=1, ge=1)
    log_level: LogLevel = LogLevel.INFO
    warn_duplicate_names: bool = False

    model_config = {"extra": "forbid"}

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> LogLevel:
        """Accept level names as well as ordinals."""
        return LogLevel.parse(v)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        data = self.model_dump()
        data["log_level"] = self.log_level.name.lower()
        return data
