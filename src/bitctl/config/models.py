"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bitctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from bitctl.domain.bits import WIDTHS


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    width: int = 64
    uppercase_hex: bool = True
    grid_columns: int = 8

    @field_validator("width")
    @classmethod
    def _supported_width(cls, value: int) -> int:
        if value not in WIDTHS:
            msg = f"width must be one of {', '.join(map(str, WIDTHS))}"
            raise ValueError(msg)
        return value

    @field_validator("grid_columns")
    @classmethod
    def _grid_divides_storage(cls, value: int) -> int:
        if value not in (4, 8, 16):
            msg = "grid_columns must be 4, 8, or 16"
            raise ValueError(msg)
        return value


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    prompt: str = "bitctl"
    show_state: bool = True
