"""Package-level entry point: evaluate()."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from indispensability_check.config import CheckerConfig, load_config
from indispensability_check.export import export_report
from indispensability_check.intake import load_input_record
from indispensability_check.models import InputRecord, ScoreResult
from indispensability_check.report import TemplateRegistry, format_report
from indispensability_check.report.registry import default_registry
from indispensability_check.scorer import compute_scores

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Everything produced by one evaluation.

    Parameters
    ----------
    record : InputRecord
        Validated answers.
    result : ScoreResult
        Scores and decision.
    report : str
        Rendered narrative report.
    export_path : Path | None
        Written report file, if exported.
    """

    record: InputRecord
    result: ScoreResult
    report: str
    export_path: Path | None = None


def _as_record(answers: InputRecord | Mapping[str, Any] | str | Path) -> InputRecord:
    if isinstance(answers, InputRecord):
        return answers
    if isinstance(answers, Mapping):
        return InputRecord.from_mapping(answers)
    return load_input_record(answers)


def evaluate(
    answers: InputRecord | Mapping[str, Any] | str | Path,
    *,
    config: str | Path | dict | CheckerConfig | None = None,
    export: bool = False,
) -> Evaluation:
    """Score a proposed experiment and render its report.

    Parameters
    ----------
    answers : InputRecord | Mapping | str | Path
        A validated record, raw answers, or a path to a YAML/JSON answers
        file.
    config : str | Path | dict | CheckerConfig | None
        Report and export configuration, see
        :func:`~indispensability_check.config.load_config`.
    export : bool
        Also write the report to ``config.export.directory``.

    Returns
    -------
    Evaluation

    Raises
    ------
    ValidationError
        If required answers are missing or out of domain.
    ExportError
        If *export* is set and the report cannot be written.
    """
    cfg = load_config(config)
    record = _as_record(answers)
    result = compute_scores(record)

    registry = TemplateRegistry(cfg.report.template_dirs) if cfg.report.template_dirs else default_registry()
    report = format_report(record, result, template=cfg.report.template, registry=registry)

    export_path = None
    if export:
        export_path = export_report(
            record,
            result,
            cfg.export.directory,
            prefix=cfg.export.filename_prefix,
            encoding=cfg.export.encoding,
            report=report,
        )

    logger.info(
        "Evaluated project=%r decision=%s suitability=%.2f strain=%.2f interest=%.2f",
        record.title,
        result.decision.name,
        result.suitability_score,
        result.strain_score,
        result.interest_score,
    )
    return Evaluation(record=record, result=result, report=report, export_path=export_path)
