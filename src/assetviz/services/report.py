"""ReportService — render a DomainTree into the timestamped HTML report."""

from __future__ import annotations

from typing import Any

import structlog
from jinja2 import TemplateError
from markupsafe import Markup

from assetviz import __version__
from assetviz.domain.serialize import TreeSerializationError, serialize_tree
from assetviz.domain.tree import DomainTree, count_nodes, tree_depth
from assetviz.infrastructure.filesystem import report_path, write_report
from assetviz.infrastructure.templates import build_template_environment
from assetviz.services._helpers import local_timestamp, now_iso
from assetviz.services.base import BaseService
from assetviz.services.result import ServiceResult

log = structlog.get_logger(__name__)

REPORT_TEMPLATE = "report.html.j2"


class ReportService(BaseService):
    """Write the jsMind report for a finished tree."""

    def _render(self, tree_json: str, summary: dict[str, Any]) -> str:
        cfg = self._settings.report
        env = build_template_environment(
            "report", override_dir=self._settings.template_override_dir
        )
        template = env.get_template(REPORT_TEMPLATE)
        return template.render(
            tree_json=Markup(tree_json),
            title=cfg.title,
            version=__version__,
            generated_at=now_iso(),
            jsmind_base=f"{cfg.cdn_base.rstrip('/')}/jsmind@{cfg.jsmind_version}",
            summary=summary,
        )

    def render_html(self, tree: DomainTree, *, summary: dict[str, Any] | None = None) -> str:
        """Render the report page to a string.

        Raises:
            TreeSerializationError: *tree* is not a str -> mapping tree.
            jinja2.TemplateError: the template is missing or broken.
        """
        return self._render(serialize_tree(tree), summary or {})

    def write_report(
        self,
        tree: DomainTree,
        *,
        summary: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Render *tree* and write it to ``<report_dir>/<prefix>_<timestamp>.html``."""
        op = "write_report"
        cfg = self._settings.report

        try:
            tree_json = serialize_tree(tree)
        except TreeSerializationError as exc:
            log.error("report.serialize_error", error=str(exc))
            return ServiceResult.failure(op, "SERIALIZE_ERROR", f"Error converting to JSON: {exc}")

        stats = {"nodes": count_nodes(tree), "depth": tree_depth(tree), **(summary or {})}
        try:
            html = self._render(tree_json, stats)
        except TemplateError as exc:
            log.error("report.template_error", error=str(exc))
            return ServiceResult.failure(op, "RENDER_ERROR", f"Error rendering template: {exc}")

        path = report_path(
            self._settings.report_dir,
            cfg.filename_prefix,
            local_timestamp(cfg.timestamp_format),
        )
        try:
            write_report(path, html)
        except OSError as exc:
            log.error("report.write_error", path=str(path), error=str(exc))
            return ServiceResult.failure(
                op,
                "RENDER_ERROR",
                f"Error creating report file: {exc}",
                path=str(path),
            )

        log.debug("report.written", path=str(path), **stats)
        return ServiceResult(ok=True, op=op, data={"path": str(path), **stats})
