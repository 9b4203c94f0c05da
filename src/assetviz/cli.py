"""Root CLI command for assetviz."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import IO

import click

from assetviz import __version__
from assetviz.commands._base import AssetvizCommand
from assetviz.commands._context import AppContext
from assetviz.config.settings import AssetvizSettings

USAGE = "Usage: assetviz -f filename OR provide input via stdin"

_EXAMPLES = """\
  assetviz -f subdomains.txt
  subfinder -d example.com -silent | assetviz
  assetviz -f hosts.txt -o reports/ --json
  assetviz -q -f hosts.txt | xargs open"""


def _stdin_is_interactive(stream: IO[str]) -> bool:
    return stream.isatty()


@click.command(cls=AssetvizCommand, examples=_EXAMPLES)
@click.version_option(version=__version__, prog_name="assetviz")
@click.option(
    "-f",
    "--file",
    "file_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to the file containing subdomain names.",
)
@click.option("-o", "--output-dir", default=None, help="Directory for the HTML report.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the report path.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    file_path: str | None,
    output_dir: str | None,
    config_path: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Build a mind-map report of a domain list.

    Reads one domain per line from FILE, or from standard input when it is
    piped, and writes an HTML report grouping the domains by suffix.
    """
    settings = AssetvizSettings.from_cli(
        config_path=config_path,
        output_dir=output_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    from assetviz.services.build import TreeBuildService
    from assetviz.services.report import ReportService

    if file_path is None:
        stdin = sys.stdin
        if _stdin_is_interactive(stdin):
            click.echo(USAGE)
            return
        built = TreeBuildService(settings).build(stdin)
    else:
        built = TreeBuildService(settings).build_from_path(Path(file_path))

    if not built.ok:
        app.emit(built)
        return

    summary = {key: built.data[key] for key in ("source", "lines_read", "skipped", "domains")}
    report = ReportService(settings).write_report(built.data["tree"], summary=summary)
    if built.warnings:
        report = report.model_copy(update={"warnings": [*built.warnings, *report.warnings]})
    app.emit(report)
