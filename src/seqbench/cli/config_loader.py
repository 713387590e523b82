"""Configuration loading and validation for the seqbench CLI.

This module provides utilities for loading, merging, and validating
configuration files with support for environment variable interpolation.
"""

from __future__ import annotations

import contextlib
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from seqbench.runner.config import HarnessConfig


class OutputConfig(BaseModel):
    """Output settings."""

    format: str = Field(default="table")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate report format."""
        allowed = {"table", "json", "markdown"}
        if v.lower() not in allowed:
            raise ValueError(f"format must be one of {allowed}, got '{v}'")
        return v.lower()


class SeqbenchConfig(BaseModel):
    """Complete CLI configuration."""

    harness: HarnessConfig = Field(default_factory=HarnessConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# Environment variable pattern: ${VAR_NAME} or ${VAR_NAME:default}
ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::([^}]*))?\}")


def interpolate_env_vars(value: Any) -> Any:
    """Recursively interpolate environment variables in config values.

    Supports:
        ${VAR_NAME} - Required env var
        ${VAR_NAME:default} - Env var with default value

    Args:
        value: Configuration value (string, dict, list, or primitive)

    Returns:
        Value with environment variables interpolated

    Raises:
        ValueError: If required env var is not set
    """
    if isinstance(value, str):
        return _interpolate_string(value)
    elif isinstance(value, dict):
        return {k: interpolate_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [interpolate_env_vars(item) for item in value]
    return value


def _interpolate_string(value: str) -> str:
    def replace_match(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value
        elif default is not None:
            return default
        else:
            raise ValueError(
                f"Environment variable '{var_name}' is not set and no default provided"
            )

    return ENV_VAR_PATTERN.sub(replace_match, value)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values in override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        path: Path to YAML file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If file is invalid YAML
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path) as f:
        config: dict[str, Any] = yaml.safe_load(f) or {}

    return config


def get_default_config_path() -> Path | None:
    """Get the default configuration file path.

    Searches for config in order:
        1. SEQBENCH_CONFIG environment variable
        2. ./seqbench.yaml
        3. ./seqbench.yml

    Returns:
        Path to config file or None if not found
    """
    env_config = os.environ.get("SEQBENCH_CONFIG")
    if env_config:
        path = Path(env_config)
        if path.exists():
            return path

    for path in (Path("seqbench.yaml"), Path("seqbench.yml")):
        if path.exists():
            return path

    return None


def get_env_config_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables.

    Supports:
        SEQBENCH_NAME - Benchmark name
        SEQBENCH_REPETITIONS - Number of repetitions
        SEQBENCH_LOG_LEVEL - Harness log threshold
        SEQBENCH_OUTPUT_FORMAT - Report format

    Returns:
        Configuration dictionary with env var overrides
    """
    overrides: dict[str, Any] = {}

    if name := os.environ.get("SEQBENCH_NAME"):
        overrides.setdefault("harness", {})["name"] = name

    if repetitions := os.environ.get("SEQBENCH_REPETITIONS"):
        with contextlib.suppress(ValueError):
            overrides.setdefault("harness", {})["repetitions"] = int(repetitions)

    if log_level := os.environ.get("SEQBENCH_LOG_LEVEL"):
        overrides.setdefault("harness", {})["log_level"] = log_level

    if output_format := os.environ.get("SEQBENCH_OUTPUT_FORMAT"):
        overrides.setdefault("output", {})["format"] = output_format

    return overrides


def validate_config(config: dict[str, Any]) -> list[str]:
    """Validate a configuration dictionary.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []

    try:
        SeqbenchConfig.model_validate(config)
    except Exception as e:
        errors.append(str(e))

    return errors


def create_config(
    config_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
    *,
    use_env_vars: bool = True,
) -> SeqbenchConfig:
    """Create a complete configuration from multiple sources.

    Configuration precedence (highest to lowest):
        1. CLI overrides
        2. Environment variable overrides
        3. User config file
        4. Default values

    Args:
        config_path: Path to user config file
        cli_overrides: Overrides from CLI options
        use_env_vars: Whether to include environment variable overrides

    Returns:
        Complete SeqbenchConfig
    """
    config: dict[str, Any] = {}

    if config_path is not None:
        user_config = load_yaml_config(config_path)
        user_config = interpolate_env_vars(user_config)
        config = deep_merge(config, user_config)

    if use_env_vars:
        config = deep_merge(config, get_env_config_overrides())

    if cli_overrides:
        config = deep_merge(config, cli_overrides)

    return SeqbenchConfig.model_validate(config)
