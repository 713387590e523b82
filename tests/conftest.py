"""Pytest configuration and shared fixtures for tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from doubles import CallLog, FakeClock, RecordingSink

# Path Fixtures


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# Environment Fixtures


@pytest.fixture(autouse=True)
def clean_environment() -> Generator[None, None, None]:
    """Ensure clean environment for each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


# Harness Collaborators


@pytest.fixture
def clock() -> FakeClock:
    """Return a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def sink() -> RecordingSink:
    """Return a sink that records log lines."""
    return RecordingSink()


@pytest.fixture
def call_log() -> CallLog:
    """Return an empty call log."""
    return CallLog()


# Pytest Configuration


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Add the unit marker to tests in test_* directories."""
    for item in items:
        if "test_" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
