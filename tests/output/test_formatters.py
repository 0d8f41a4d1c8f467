"""Tests for output mode selection."""

from __future__ import annotations

import json

from bitctl.domain.errors import ParseError
from bitctl.output.formatters import OutputSettings, format_result
from bitctl.services.bits import BitService
from bitctl.services.result import ServiceResult
from bitctl.services.state import BitState


def _inspect(value: int = 42, width: int = 64) -> ServiceResult:
    return BitService(BitState(value, width)).inspect()


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        output = format_result(_inspect())
        assert output.startswith("OK")
        assert "HEX" in output

    def test_json(self) -> None:
        output = format_result(_inspect(), settings=OutputSettings(json_output=True))
        payload = json.loads(output)
        assert payload["ok"] is True
        assert payload["data"]["value"] == 42

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_inspect(), settings=settings))["op"] == "inspect"

    def test_quiet(self) -> None:
        assert format_result(_inspect(), settings=OutputSettings(quiet=True)) == "42"

    def test_quiet_error(self) -> None:
        result = ServiceResult.failure("edit", ParseError("Invalid hex input: 'zz'"))
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: edit")
        assert "Invalid hex input" in output

    def test_grid_columns_passed_through(self) -> None:
        output = format_result(_inspect(), settings=OutputSettings(grid_columns=16))
        assert "63..48" in output
        assert "63..56" not in output
