"""Rich Console factory and theme for bitctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BIT_THEME = Theme(
    {
        "bit.ok": "bold green",
        "bit.error": "bold red",
        "bit.warning": "bold yellow",
        "bit.op": "bold cyan",
        "bit.key": "dim",
        "bit.on": "bold green",
        "bit.off": "dim white",
        "bit.inactive": "bright_black",
        "bit.index": "dim cyan",
        "bit.base": "bold",
        "bit.value": "bold blue",
        "bit.float.sign": "magenta",
        "bit.float.exponent": "yellow",
        "bit.float.mantissa": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def bit_style(on: bool, *, active: bool = True) -> str:
    """Style name for one grid cell."""
    if not active:
        return "bit.inactive"
    return "bit.on" if on else "bit.off"
