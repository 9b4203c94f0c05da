"""Report file output."""

from __future__ import annotations

from pathlib import Path


def report_path(output_dir: Path, prefix: str, stamp: str) -> Path:
    """``<output_dir>/<prefix>_<stamp>.html``."""
    return output_dir / f"{prefix}_{stamp}.html"


def write_report(path: Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
