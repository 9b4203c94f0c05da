"""TreeBuildService — read candidate lines and assemble the DomainTree.

The input loop is fail-fast: the first line that survives normalization
but fails validation stops the run. Nothing after it is read, and the
partially built tree is thrown away.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from assetviz.domain.normalize import normalize_line
from assetviz.domain.tree import count_nodes, insert_domain, new_tree, tree_depth
from assetviz.domain.validation import DomainValidator
from assetviz.services.base import BaseService
from assetviz.services.result import ServiceResult

log = structlog.get_logger(__name__)

INVALID_INPUT_MESSAGE = "input contains invalid entries"


class TreeBuildService(BaseService):
    """Normalize, validate, and insert domains from a line stream."""

    def _validator(self) -> DomainValidator:
        parser = self._settings.parser
        return DomainValidator(
            include_psl_private_domains=parser.include_psl_private_domains,
            cache_dir=parser.cache_dir or None,
        )

    def build(self, lines: Iterable[str], *, source: str = "<stdin>") -> ServiceResult:
        """Build a tree from *lines*.

        On success ``data`` holds ``tree`` plus the counters ``lines_read``,
        ``skipped``, ``domains``, ``nodes`` and ``depth``. Log events emitted
        while building carry ``source``.
        """
        with structlog.contextvars.bound_contextvars(source=source):
            return self._build(lines, source)

    def _build(self, lines: Iterable[str], source: str) -> ServiceResult:
        validator = self._validator()
        tree = new_tree()
        lines_read = skipped = accepted = 0
        log.debug("build.start")

        try:
            for lines_read, raw in enumerate(lines, start=1):
                domain = normalize_line(raw)
                if domain is None:
                    skipped += 1
                    continue
                if not validator.is_valid(domain):
                    log.warning("build.invalid_line", line=lines_read, value=domain)
                    return ServiceResult.failure(
                        "build_tree",
                        "INVALID_INPUT",
                        INVALID_INPUT_MESSAGE,
                        source=source,
                        line=lines_read,
                        value=domain,
                    )
                insert_domain(tree, domain)
                accepted += 1
        except (OSError, UnicodeDecodeError) as exc:
            log.error("build.read_error", error=str(exc))
            return ServiceResult.failure(
                "build_tree",
                "READ_ERROR",
                f"Error reading input: {exc}",
                source=source,
            )

        data = {
            "source": source,
            "tree": tree,
            "lines_read": lines_read,
            "skipped": skipped,
            "domains": accepted,
            "nodes": count_nodes(tree),
            "depth": tree_depth(tree),
        }
        log.debug("build.complete", **data)
        warnings = [] if accepted else ["Input contained no domains; the report will be empty"]
        return ServiceResult(ok=True, op="build_tree", data=data, warnings=warnings)

    def build_from_path(self, path: Path) -> ServiceResult:
        """Open *path* as UTF-8 text and build a tree from its lines."""
        try:
            handle = path.open(encoding="utf-8")
        except OSError as exc:
            log.error("build.open_error", path=str(path), error=str(exc))
            return ServiceResult.failure(
                "build_tree",
                "READ_ERROR",
                f"Error opening file: {exc}",
                source=str(path),
            )
        with handle:
            return self.build(handle, source=str(path))
