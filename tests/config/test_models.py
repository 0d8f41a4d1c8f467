"""Tests for config section models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bitctl.config.models import DisplayConfig, ShellConfig


class TestDisplayConfig:
    def test_defaults(self) -> None:
        cfg = DisplayConfig()
        assert cfg.width == 64
        assert cfg.uppercase_hex is True
        assert cfg.grid_columns == 8

    def test_rejects_unsupported_width(self) -> None:
        with pytest.raises(ValidationError, match="width must be one of"):
            DisplayConfig(width=24)

    @pytest.mark.parametrize("columns", [4, 8, 16])
    def test_grid_columns(self, columns: int) -> None:
        assert DisplayConfig(grid_columns=columns).grid_columns == columns

    def test_rejects_odd_grid(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(grid_columns=6)

    def test_frozen(self) -> None:
        cfg = DisplayConfig()
        with pytest.raises(ValidationError):
            cfg.width = 8  # type: ignore[misc]


class TestShellConfig:
    def test_defaults(self) -> None:
        cfg = ShellConfig()
        assert cfg.prompt == "bitctl"
        assert cfg.show_state is True
