"""Unified configuration for report rendering and export."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class ReportConfig:
    """Report template selection.

    Parameters
    ----------
    template : str
        Name of a registered report template.
    template_dirs : list[str]
        Additional directories scanned for ``.yaml`` report templates.
    """

    template: str = "weighing_of_interests"
    template_dirs: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.template:
            msg = "template must be a non-empty string"
            raise ValueError(msg)


@dataclass
class ExportConfig:
    """Report file export settings.

    Parameters
    ----------
    directory : str
        Directory the report file is written to.
    filename_prefix : str
        Prefix prepended to the slugged project title.
    encoding : str
        Text encoding of the written file.
    """

    directory: str = "."
    filename_prefix: str = "weighing_of_interests_"
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.directory:
            msg = "directory must be a non-empty string"
            raise ValueError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            msg = f"encoding {self.encoding!r} is not a known codec"
            raise ValueError(msg) from None


@dataclass
class CheckerConfig:
    """Top-level configuration.

    Parameters
    ----------
    report : ReportConfig
        Template settings.
    export : ExportConfig
        Export settings.
    """

    report: ReportConfig = field(default_factory=ReportConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def load_config(source: str | Path | dict[str, Any] | CheckerConfig | None = None) -> CheckerConfig:
    """Load a CheckerConfig from a YAML file, dict, or environment variables.

    Environment variables take precedence over values from *source*:
    ``INDISPENSABILITY_REPORT_TEMPLATE``, ``INDISPENSABILITY_EXPORT_DIR`` and
    ``INDISPENSABILITY_FILENAME_PREFIX``.

    Parameters
    ----------
    source : str | Path | dict | CheckerConfig | None
        A path to a YAML file, a raw dict, an existing config (returned
        unchanged), or ``None`` to use only environment overrides on
        defaults.

    Returns
    -------
    CheckerConfig
    """
    if isinstance(source, CheckerConfig):
        return source

    raw: dict[str, Any] = {}

    if isinstance(source, dict):
        raw = source
    elif source is not None:
        path = Path(source)
        if path.is_file():
            raw = _load_yaml(path)

    report_raw = raw.get("report", {})
    export_raw = raw.get("export", {})

    report = ReportConfig(
        template=os.environ.get("INDISPENSABILITY_REPORT_TEMPLATE", report_raw.get("template", "weighing_of_interests")),
        template_dirs=[str(d) for d in report_raw.get("template_dirs", [])],
    )
    export = ExportConfig(
        directory=os.environ.get("INDISPENSABILITY_EXPORT_DIR", str(export_raw.get("directory", "."))),
        filename_prefix=os.environ.get(
            "INDISPENSABILITY_FILENAME_PREFIX", export_raw.get("filename_prefix", "weighing_of_interests_")
        ),
        encoding=export_raw.get("encoding", "utf-8"),
    )

    return CheckerConfig(report=report, export=export)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file using PyYAML."""
    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}
