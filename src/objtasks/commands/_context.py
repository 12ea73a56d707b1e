"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission
(stdout/stderr routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from objtasks.config.logging import configure_logging
from objtasks.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from objtasks.config.settings import ObjSettings
    from objtasks.services.result import ServiceResult


class AppContext:
    """Settings plus output plumbing for one CLI invocation."""

    def __init__(self, settings: ObjSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            indent=self.settings.output.indent,
        )

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult and set the exit status.

        * Success: stdout, normal return. Warnings go to stderr unless the
          output is JSON (where they are part of the payload).
        * Failure: stderr, exit code 1.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
