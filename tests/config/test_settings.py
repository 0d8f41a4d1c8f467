"""Tests for BitSettings source priority."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from bitctl.config.discovery import CONFIG_FILENAME
from bitctl.config.settings import BitSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("BITCTL_CONFIG", "BITCTL_WIDTH", "BITCTL_QUIET", "BITCTL_DISPLAY__WIDTH"):
        monkeypatch.delenv(key, raising=False)


def _write_config(directory: Path, text: str) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(text)
    return path


class TestDefaults:
    def test_code_defaults(self, tmp_path: Path) -> None:
        settings = BitSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.width is None
        assert settings.active_width == 64
        assert settings.display.uppercase_hex is True
        assert settings.shell.prompt == "bitctl"

    def test_none_flags_are_dropped(self, tmp_path: Path) -> None:
        settings = BitSettings.from_cli(start=tmp_path, width=None, quiet=True)
        assert settings.quiet is True
        assert settings.width is None


class TestTomlSource:
    def test_sections_loaded(self, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            "[display]\nwidth = 16\nuppercase_hex = false\n[shell]\nprompt = 'bits'\n",
        )
        settings = BitSettings.from_cli(start=tmp_path)
        assert settings.config_path == path
        assert settings.active_width == 16
        assert settings.display.uppercase_hex is False
        assert settings.shell.prompt == "bits"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        path = tmp_path / "other.toml"
        path.write_text("[display]\nwidth = 8\n")
        settings = BitSettings.from_cli(config_path=str(path), start=tmp_path)
        assert settings.active_width == 8

    def test_missing_explicit_path_falls_back_to_defaults(self, tmp_path: Path) -> None:
        settings = BitSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.active_width == 64

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[display\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BitSettings.from_cli(start=tmp_path)

    def test_invalid_width_in_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[display]\nwidth = 12\n")
        with pytest.raises(ValidationError):
            BitSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flag_beats_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[display]\nwidth = 16\n")
        settings = BitSettings.from_cli(start=tmp_path, width=32)
        assert settings.active_width == 32
        assert settings.display.width == 16

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, "[display]\nwidth = 16\n")
        monkeypatch.setenv("BITCTL_WIDTH", "8")
        settings = BitSettings.from_cli(start=tmp_path)
        assert settings.active_width == 8

    def test_nested_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BITCTL_DISPLAY__WIDTH", "32")
        settings = BitSettings.from_cli(start=tmp_path)
        assert settings.display.width == 32

    def test_cli_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BITCTL_QUIET", "false")
        settings = BitSettings.from_cli(start=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = BitSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]
