"""Weighing of interests for proposed animal experiments: scoring, decision and narrative report."""

from indispensability_check.api import Evaluation, evaluate
from indispensability_check.config import CheckerConfig, load_config
from indispensability_check.export import export_report, report_filename
from indispensability_check.intake import load_answers, load_input_record
from indispensability_check.models import (
    Decision,
    ExportError,
    InputRecord,
    NonpathocentricFactor,
    ScoreResult,
    SocietalInterest,
    ValidationError,
)
from indispensability_check.report import format_report, format_scores, list_templates, register_template
from indispensability_check.scorer import compute_scores, decide

__all__ = [
    "CheckerConfig",
    "Decision",
    "Evaluation",
    "ExportError",
    "InputRecord",
    "NonpathocentricFactor",
    "ScoreResult",
    "SocietalInterest",
    "ValidationError",
    "compute_scores",
    "decide",
    "evaluate",
    "export_report",
    "format_report",
    "format_scores",
    "list_templates",
    "load_answers",
    "load_config",
    "load_input_record",
    "register_template",
    "report_filename",
]
