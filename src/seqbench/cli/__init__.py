"""seqbench Command Line Interface.

This module provides the command-line interface for seqbench, enabling
users to run benchmark targets and inspect their schedules.
"""

from seqbench.cli.config_loader import (
    OutputConfig,
    SeqbenchConfig,
    create_config,
    deep_merge,
    get_default_config_path,
    get_env_config_overrides,
    interpolate_env_vars,
    load_yaml_config,
    validate_config,
)
from seqbench.cli.main import cli
from seqbench.cli.target import load_target

__all__ = [
    # CLI entry point
    "cli",
    "load_target",
    # Configuration models
    "SeqbenchConfig",
    "OutputConfig",
    # Configuration utilities
    "load_yaml_config",
    "create_config",
    "validate_config",
    "interpolate_env_vars",
    "get_env_config_overrides",
    "get_default_config_path",
    "deep_merge",
]
