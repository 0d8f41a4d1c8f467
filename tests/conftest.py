"""Shared pytest fixtures for bitctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bitctl.services.bits import BitService
from bitctl.services.state import BitState


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def state() -> BitState:
    """A fresh 64-bit state cell holding 42."""
    return BitState(42, 64)


@pytest.fixture
def svc(state: BitState) -> BitService:
    return BitService(state)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no BITCTL_* env so only code defaults apply.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes. Tests that need the directory can request ``tmp_path`` directly.
    """
    for key in ("BITCTL_CONFIG", "BITCTL_WIDTH", "BITCTL_DISPLAY__WIDTH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Every CLI invocation reconfigures logging; put the root logger back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bitctl_logger = logging.getLogger("bitctl")
    bitctl_level = bitctl_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bitctl_logger.setLevel(bitctl_level)
