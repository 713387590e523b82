"""Resolution of ``module:attribute`` benchmark targets."""

from __future__ import annotations

import importlib

from seqbench.runner.errors import TargetLoadError
from seqbench.runner.harness import Benchmark


def load_target(target: str) -> Benchmark:
    """Import a benchmark given as ``package.module:attribute``.

    The attribute may be a Benchmark instance or a zero-argument callable
    returning one.

    Args:
        target: Import path and attribute name separated by a colon.

    Returns:
        The resolved Benchmark.

    Raises:
        TargetLoadError: If the target is malformed, cannot be imported,
            or does not yield a Benchmark.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise TargetLoadError(f"Target must look like 'module:attribute', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise TargetLoadError(f"Cannot import module '{module_name}': {e}") from e

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetLoadError(f"'{module_name}' has no attribute '{attribute}'") from e

    if not isinstance(obj, Benchmark) and callable(obj):
        try:
            obj = obj()
        except Exception as e:
            raise TargetLoadError(f"Calling '{target}' failed: {e}") from e

    if not isinstance(obj, Benchmark):
        raise TargetLoadError(
            f"Target '{target}' resolved to {type(obj).__name__}, expected a Benchmark"
        )

    return obj
