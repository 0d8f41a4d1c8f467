"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich tables, bit grid, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from bitctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from bitctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-mode flags derived from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    grid_columns: int = 8


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the full Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, grid_columns=settings.grid_columns)
