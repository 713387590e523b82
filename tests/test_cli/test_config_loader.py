"""Tests for configuration loader module."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

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
from seqbench.runner.log import LogLevel


class TestOutputConfig:
    """Tests for OutputConfig validation."""

    def test_default_values(self) -> None:
        """Test default output format."""
        assert OutputConfig().format == "table"

    def test_case_insensitive_format(self) -> None:
        """Test format names are normalized."""
        assert OutputConfig(format="JSON").format == "json"

    def test_invalid_format(self) -> None:
        """Test invalid format raises error."""
        with pytest.raises(ValueError, match="format must be one of"):
            OutputConfig(format="xml")


class TestSeqbenchConfig:
    """Tests for the complete configuration."""

    def test_default_config(self) -> None:
        """Test default nested configuration."""
        config = SeqbenchConfig()
        assert config.harness.repetitions == 1
        assert config.harness.log_level == LogLevel.INFO
        assert config.output.format == "table"

    def test_nested_config(self) -> None:
        """Test nested configuration from a dictionary."""
        config = SeqbenchConfig.model_validate(
            {"harness": {"repetitions": 4, "log_level": "fine"}, "output": {"format": "json"}}
        )
        assert config.harness.repetitions == 4
        assert config.harness.log_level == LogLevel.FINE
        assert config.output.format == "json"

    def test_explicit_fields_tracked(self) -> None:
        """Only keys present in the source count as explicitly set."""
        config = SeqbenchConfig.model_validate({"harness": {"repetitions": 2}})
        assert config.harness.model_fields_set == {"repetitions"}


class TestInterpolateEnvVars:
    """Tests for environment variable interpolation."""

    def test_simple_interpolation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test simple env var interpolation."""
        monkeypatch.setenv("TEST_VAR", "test_value")
        assert interpolate_env_vars("${TEST_VAR}") == "test_value"

    def test_interpolation_with_default(self) -> None:
        """Test interpolation with default value."""
        os.environ.pop("UNSET_VAR", None)
        assert interpolate_env_vars("${UNSET_VAR:default_value}") == "default_value"

    def test_required_var_not_set(self) -> None:
        """Test required var raises error."""
        os.environ.pop("REQUIRED_VAR", None)
        with pytest.raises(ValueError, match="Environment variable 'REQUIRED_VAR'"):
            interpolate_env_vars("${REQUIRED_VAR}")

    def test_interpolate_nested_dict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test interpolation in nested dict."""
        monkeypatch.setenv("BENCH_NAME", "nightly")
        data = {
            "harness": {"name": "${BENCH_NAME}", "repetitions": 3},
            "output": {"format": "${FORMAT:json}"},
        }
        result = interpolate_env_vars(data)
        assert result["harness"]["name"] == "nightly"
        assert result["harness"]["repetitions"] == 3
        assert result["output"]["format"] == "json"

    def test_interpolate_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test interpolation in list."""
        monkeypatch.setenv("ITEM_A", "value_a")
        assert interpolate_env_vars(["${ITEM_A}", "${ITEM_B:default_b}"]) == [
            "value_a",
            "default_b",
        ]


class TestDeepMerge:
    """Tests for deep merge functionality."""

    def test_nested_merge(self) -> None:
        """Test nested dict merge."""
        base = {"harness": {"name": "a", "repetitions": 1}}
        override = {"harness": {"repetitions": 5}}
        assert deep_merge(base, override) == {"harness": {"name": "a", "repetitions": 5}}

    def test_override_replaces_non_dict(self) -> None:
        """Test override replaces non-dict values."""
        assert deep_merge({"a": {"b": 1}}, {"a": "string"}) == {"a": "string"}

    def test_base_not_modified(self) -> None:
        """Test base dict is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadYamlConfig:
    """Tests for YAML loading."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Test loading valid YAML file."""
        config_file = tmp_path / "seqbench.yaml"
        config_file.write_text("harness:\n  repetitions: 3\n  log_level: fine")

        result = load_yaml_config(config_file)
        assert result["harness"] == {"repetitions": 3, "log_level": "fine"}

    def test_load_nonexistent_file(self, tmp_path: Path) -> None:
        """Test loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_yaml_config(tmp_path / "nonexistent.yaml")

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test loading empty YAML returns empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_yaml_config(config_file) == {}


class TestGetDefaultConfigPath:
    """Tests for default config path detection."""

    def test_returns_none_when_no_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test returns None when no config file found."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SEQBENCH_CONFIG", raising=False)
        assert get_default_config_path() is None

    def test_finds_seqbench_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test finds seqbench.yaml in current directory."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SEQBENCH_CONFIG", raising=False)
        config_file = tmp_path / "seqbench.yaml"
        config_file.write_text("harness:\n  repetitions: 2")

        result = get_default_config_path()
        assert result is not None
        assert result.resolve() == config_file.resolve()

    def test_env_var_takes_precedence(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test SEQBENCH_CONFIG env var takes precedence."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "seqbench.yaml").write_text("harness:\n  repetitions: 2")
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("harness:\n  repetitions: 7")
        monkeypatch.setenv("SEQBENCH_CONFIG", str(config_file))

        assert get_default_config_path() == config_file


class TestValidateConfig:
    """Tests for configuration validation."""

    def test_valid_config(self) -> None:
        """Test validating a valid config."""
        assert validate_config({"harness": {"repetitions": 2}}) == []

    def test_invalid_repetitions(self) -> None:
        """Test non-positive repetitions produce an error."""
        errors = validate_config({"harness": {"repetitions": 0}})
        assert len(errors) == 1
        assert "repetitions" in errors[0]


class TestGetEnvConfigOverrides:
    """Tests for environment variable overrides."""

    def test_no_overrides_when_no_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test returns empty when no env vars set."""
        for var in [
            "SEQBENCH_NAME",
            "SEQBENCH_REPETITIONS",
            "SEQBENCH_LOG_LEVEL",
            "SEQBENCH_OUTPUT_FORMAT",
        ]:
            monkeypatch.delenv(var, raising=False)

        assert get_env_config_overrides() == {}

    def test_multiple_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test multiple overrides."""
        monkeypatch.setenv("SEQBENCH_NAME", "nightly")
        monkeypatch.setenv("SEQBENCH_REPETITIONS", "5")
        monkeypatch.setenv("SEQBENCH_LOG_LEVEL", "fine")
        monkeypatch.setenv("SEQBENCH_OUTPUT_FORMAT", "markdown")

        overrides = get_env_config_overrides()
        assert overrides == {
            "harness": {"name": "nightly", "repetitions": 5, "log_level": "fine"},
            "output": {"format": "markdown"},
        }

    def test_invalid_repetitions_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test non-integer repetitions are ignored."""
        monkeypatch.setenv("SEQBENCH_REPETITIONS", "many")
        overrides = get_env_config_overrides()
        assert "repetitions" not in overrides.get("harness", {})


class TestCreateConfig:
    """Tests for create_config function."""

    def test_default_config(self) -> None:
        """Test creating default config."""
        config = create_config(use_env_vars=False)
        assert isinstance(config, SeqbenchConfig)
        assert config.harness.repetitions == 1

    def test_with_config_file(self, tmp_path: Path) -> None:
        """Test creating config from file."""
        config_file = tmp_path / "seqbench.yaml"
        config_file.write_text("harness:\n  repetitions: 3\noutput:\n  format: json")

        config = create_config(config_path=config_file)
        assert config.harness.repetitions == 3
        assert config.output.format == "json"

    def test_precedence_order(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test configuration precedence: CLI > env > file > defaults."""
        config_file = tmp_path / "seqbench.yaml"
        config_file.write_text("harness:\n  repetitions: 2\n  log_level: warning")
        monkeypatch.setenv("SEQBENCH_REPETITIONS", "3")
        monkeypatch.setenv("SEQBENCH_LOG_LEVEL", "fine")

        config = create_config(
            config_path=config_file,
            cli_overrides={"harness": {"repetitions": 4}},
            use_env_vars=True,
        )
        assert config.harness.repetitions == 4
        assert config.harness.log_level == LogLevel.FINE

    def test_disabled_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env vars can be disabled."""
        monkeypatch.setenv("SEQBENCH_REPETITIONS", "9")
        config = create_config(use_env_vars=False)
        assert config.harness.repetitions == 1
