"""Locate the assetviz config file for a run.

A project keeps its settings either in ``assetviz.toml`` or in
``.assetviz/config.toml`` next to its template overrides. The nearest
directory holding one of them, walking up from the start directory, is
the project root. ``ASSETVIZ_CONFIG`` names a file directly and disables
the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "assetviz.toml"
PROJECT_DIRNAME = ".assetviz"
CONFIG_ENV_VAR = "ASSETVIZ_CONFIG"

# Checked in order within each directory.
_CANDIDATES = (
    Path(CONFIG_FILENAME),
    Path(PROJECT_DIRNAME) / "config.toml",
)


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: CWD), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        named = Path(env_path).expanduser()
        return named if named.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        for candidate in _CANDIDATES:
            path = directory / candidate
            if path.is_file():
                return path
    return None


def project_root(config_path: Path) -> Path:
    """Directory a config file belongs to.

    ``.assetviz/config.toml`` belongs to the directory containing
    ``.assetviz``; any other file belongs to its own parent.
    """
    parent = config_path.parent
    if parent.name == PROJECT_DIRNAME:
        return parent.parent
    return parent
