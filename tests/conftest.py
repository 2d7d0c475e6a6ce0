"""
Shared pytest fixtures and configuration for anukit tests.

This module provides:
- ``src`` on ``sys.path`` so the package imports without installation
- Isolation of process-wide state: cached settings, the shared async
  executor and structlog configuration
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure anukit package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from anukit.core.settings import reset_settings
from anukit.toolkit import shutdown_executor


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test without an explicit marker as a unit test."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "slow"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_runtime_state() -> Generator[None, None, None]:
    """
    Reset settings, executor and structlog configuration around each test.

    Settings are cached per process and the async executor is shared, so a
    test that changes the environment or submits work must not leak into
    the next one.
    """
    reset_settings()
    structlog.reset_defaults()
    yield
    shutdown_executor()
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def io_error() -> OSError:
    """A representative exception payload."""
    return OSError("File error")
