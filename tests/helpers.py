"""Test helpers shared across test modules."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def reports_in(directory: Path) -> list[Path]:
    """Sorted report files written under *directory*."""
    if not directory.is_dir():
        return []
    return sorted(directory.glob("assetviz_report_*.html"))


class RecordingLines:
    """Line iterator that remembers how many lines were pulled from it."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = lines
        self.consumed = 0

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            self.consumed += 1
            yield line
