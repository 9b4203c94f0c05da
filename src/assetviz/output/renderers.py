"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from assetviz.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from assetviz.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_ok(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the report path."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data.get("path", f"OK: {result.op}"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="av.key")
    if key == "path":
        v = Text(str(value), style="av.path")
    elif isinstance(value, int):
        v = Text(str(value), style="av.count")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", soft_wrap=True)


def _render_ok(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="av.ok"), Text(f"  {result.op}", style="av.op"), sep="")
    for key, value in result.data.items():
        if isinstance(value, dict):
            continue
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("ERROR", style="av.error"), Text(f"  {result.op}", style="av.op"), sep="")
    if result.error is None:
        console.print(Text("  Unknown error"))
        return
    console.print(Text(f"  {result.error.message}"))
    for key, value in result.error.detail.items():
        _field(console, key, value)
    if verbose:
        _field(console, "code", result.error.code)
