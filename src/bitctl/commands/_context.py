"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the session's BitState and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bitctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from bitctl.config.settings import BitSettings
    from bitctl.services.bits import BitService
    from bitctl.services.result import ServiceResult
    from bitctl.services.state import BitState


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The state cell is
    created on demand, so ``--help`` and ``--version`` never build one.
    """

    def __init__(self, settings: BitSettings) -> None:
        self.settings = settings
        self._state: BitState | None = None

        from bitctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            grid_columns=self.settings.display.grid_columns,
        )

    @property
    def state(self) -> BitState:
        """The session's value cell (zero at the configured width until loaded)."""
        if self._state is None:
            from bitctl.services.state import BitState

            self._state = BitState(0, self.settings.active_width)
        return self._state

    def load(self, value: int) -> BitState:
        """Start the session's value cell at *value*, masked to the active width."""
        from bitctl.services.state import BitState

        self._state = BitState(value, self.settings.active_width)
        return self._state

    def service(self) -> BitService:
        from bitctl.services.bits import BitService

        return BitService(self.state, uppercase_hex=self.settings.display.uppercase_hex)

    def render(self, result: ServiceResult) -> str:
        return format_result(result, settings=self.output_settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = self.render(result)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
