"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from assetviz.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from assetviz.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Mapping-valued data (such as a built tree) is left out of every mode;
    the report file is where the tree goes.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        nested = {k for k, v in result.data.items() if isinstance(v, dict)}
        return result.model_dump_json(indent=2, exclude={"data": nested} if nested else None)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
