"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ASSETVIZ_*`` prefix
  3. TOML file    — ``assetviz.toml`` or ``.assetviz/config.toml``, walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from assetviz.config.discovery import find_config, project_root
from assetviz.config.models import ParserConfig, ReportConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``assetviz.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class AssetvizSettings(BaseSettings):
    """Settings for one assetviz run.

    Attributes:
        work_dir: Directory relative report paths and template overrides
            resolve against (parent of ``assetviz.toml``, or CWD).
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ASSETVIZ_",
        "env_nested_delimiter": "__",
    }

    work_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    report: ReportConfig = Field(default_factory=ReportConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def report_dir(self) -> Path:
        """Absolute directory reports are written to."""
        out = Path(self.report.output_dir).expanduser()
        return out if out.is_absolute() else self.work_dir / out

    @property
    def template_override_dir(self) -> Path:
        return self.work_dir / ".assetviz" / "templates"

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        work_dir: Path | None = None,
        output_dir: str | None = None,
        **cli_flags: Any,
    ) -> AssetvizSettings:
        """Construct settings from a CLI invocation.

        Discovers the config file via walk-up (or explicit *config_path*),
        resolves *work_dir* to the project the file belongs to, and
        applies CLI flags as highest-priority overrides. *output_dir*
        replaces ``[report] output_dir`` and is resolved against the CWD.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(work_dir)

        resolved_root = work_dir
        if resolved_root is None:
            resolved_root = project_root(toml_path) if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            settings = cls(
                work_dir=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

        if output_dir:
            resolved = str(Path(output_dir).expanduser().resolve())
            report = settings.report.model_copy(update={"output_dir": resolved})
            settings = settings.model_copy(update={"report": report})
        return settings
