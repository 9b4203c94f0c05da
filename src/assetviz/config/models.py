"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, assetviz.toml only contains
overrides. No config file is needed for a default run.
"""

from __future__ import annotations

from pydantic import BaseModel


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    output_dir: str = ".report"
    filename_prefix: str = "assetviz_report"
    timestamp_format: str = "%Y-%m-%d_%H-%M-%S"
    title: str = "AssetViz"
    jsmind_version: str = "0.8.1"
    cdn_base: str = "https://cdn.jsdelivr.net/npm"


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    include_psl_private_domains: bool = False
    cache_dir: str = ""
