"""Exceptions raised by seqbench."""

from __future__ import annotations


class SeqbenchError(Exception):
    """Base class for seqbench errors."""


class ValidationFailure(SeqbenchError):
    """A test's validator resolved to a falsy value.

    Attributes:
        test_name: Name of the test whose result was rejected.
    """

    def __init__(self, test_name: str) -> None:
        self.test_name = test_name
        super().__init__(f"{test_name} validation failed")


class TargetLoadError(SeqbenchError):
    """A ``module:attribute`` target could not be resolved to a benchmark."""
