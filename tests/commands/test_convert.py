"""Tests for the convert command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from bitctl.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestConvertCommand:
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["convert", "255", "--from", "dec", "--to", "hex"], "0xFF"),
            (["convert", "ff", "-f", "hex", "-t", "dec"], "255"),
            (["convert", "0o17", "-f", "oct", "-t", "bin"], "0b" + "0" * 60 + "1111"),
            (["-w", "32", "convert", "78563412", "--from", "hex_le", "--to", "hex"], "0x12345678"),
            (["-w", "16", "convert", "0x4142", "-f", "hex", "-t", "ascii"], "BA"),
            (["-w", "8", "convert", "123", "-f", "hex", "-t", "dec"], "18"),
        ],
    )
    def test_conversions(self, cli_runner: CliRunner, args: list[str], expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", *args])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == expected

    def test_all_views(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-w", "8", "convert", "65", "--from", "dec"])
        assert result.exit_code == 0
        for label in ("DEC", "BIN", "HEX", "HEX BE", "HEX LE", "OCT", "ASCII", "UTF-8"):
            assert label in result.output

    def test_invalid_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "zz", "--from", "hex"])
        assert result.exit_code == 1
        assert "Invalid hex input" in result.stderr

    def test_wrong_length_byte_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-w", "16", "convert", "12", "-f", "hex_be"])
        assert result.exit_code == 1
        assert "exactly 4 hex digits" in result.stderr

    def test_read_only_source_base(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "A", "--from", "ascii"])
        assert result.exit_code == 2

    def test_from_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "12"])
        assert result.exit_code == 2
