"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import datetime


def local_timestamp(fmt: str) -> str:
    """Current local time formatted with *fmt* (report filenames use local time)."""
    return datetime.now().strftime(fmt)


def now_iso() -> str:
    """Current local time as ISO 8601 with UTC offset (shown in report footers)."""
    return datetime.now().astimezone().isoformat(timespec="seconds")
