"""structlog setup for an assetviz run.

Events go to stderr through stdlib logging, so stdout only ever carries
the command result (report path, JSON envelope, or status lines). The
console renderer is used by default and ``--log-json`` switches to one
JSON object per line.

Context bound with ``structlog.contextvars`` (the input ``source`` while a
tree is being built) is merged into every event.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, MutableMapping
from typing import Any

import structlog

# Libraries that log suffix-list cache activity below WARNING.
LIBRARY_LOGGERS = ("tldextract", "filelock")


def _summarize_mappings(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Replace mapping values (domain trees) with their top-level key count."""
    for key, value in event_dict.items():
        if isinstance(value, Mapping):
            event_dict[key] = f"<{len(value)} keys>"
    return event_dict


def _event_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _summarize_mappings,
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route assetviz events to stderr.

    Args:
        verbose: Let ``assetviz.*`` DEBUG events through (``build.start``,
            ``report.written``). Otherwise only warnings and errors show.
        log_json: Render events as JSON lines instead of console text.
    """
    processors = _event_processors()
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    # One handler per process; a second call swaps it out.
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger("assetviz").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
