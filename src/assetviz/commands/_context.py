"""AppContext — settings, logging, and result emission for one CLI run."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from assetviz.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from assetviz.config.settings import AssetvizSettings
    from assetviz.services.result import ServiceResult


class AppContext:
    """Shared state for a single invocation.

    Configures structured logging on construction and centralizes
    stdout/stderr routing and exit codes in :meth:`emit`.
    """

    def __init__(self, settings: AssetvizSettings) -> None:
        self.settings = settings

        from assetviz.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
