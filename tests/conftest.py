"""Shared pytest fixtures and test helpers for assetviz tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from assetviz.config.settings import AssetvizSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep user config and the shared tldextract cache out of every test."""
    monkeypatch.delenv("ASSETVIZ_CONFIG", raising=False)
    monkeypatch.delenv("ASSETVIZ_REPORT__OUTPUT_DIR", raising=False)
    monkeypatch.setenv("TLDEXTRACT_CACHE", str(tmp_path_factory.getbasetemp() / "tldextract"))


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to a temp directory so reports land somewhere disposable."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> AssetvizSettings:
    return AssetvizSettings.from_cli(work_dir=tmp_path)


@pytest.fixture
def domains_file(tmp_path: Path) -> Path:
    path = tmp_path / "domains.txt"
    path.write_text(
        "\n".join(
            [
                "www.example.com",
                "https://api.example.com:8443",
                "",
                "mail.example.co.uk.",
                "  dev.api.example.com  ",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo the handler swap configure_logging() performs on each CLI run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("assetviz")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
