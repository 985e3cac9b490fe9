"""Narrative report and score panel rendering."""

from __future__ import annotations

from typing import Any

import jinja2

from indispensability_check.models import (
    SCALE_ANCHORS,
    SEVERITY_ANCHORS,
    InputRecord,
    NonpathocentricFactor,
    ScoreResult,
    SocietalInterest,
)
from indispensability_check.report.registry import ReportTemplate, TemplateRegistry, default_registry

DEFAULT_TEMPLATE = "weighing_of_interests"
SCORES_TEMPLATE = "score_summary"

UNTITLED = "Untitled project"
NO_OBJECTIVE = "Objective not provided"
EMPTY = "—"

_env = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    autoescape=False,
)


def _text(value: str, placeholder: str) -> str:
    return value if value.strip() else placeholder


def _scale(value: int) -> str:
    return f"{value} ({SCALE_ANCHORS[value]})"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _score(value: float) -> str:
    return f"{value:.2f}"


def score_context(result: ScoreResult) -> dict[str, Any]:
    """Template variables derived from a score result."""
    return {
        "suitability_score": _score(result.suitability_score),
        "strain_score": _score(result.strain_score),
        "interest_score": _score(result.interest_score),
        "decision": result.decision.name,
        "decision_text": result.decision.text,
    }


def report_context(record: InputRecord, result: ScoreResult) -> dict[str, Any]:
    """Template variables for the narrative report.

    Selected factors and interests are listed as labels in enum declaration
    order, independent of the order they were selected in.
    """
    context = {
        "title": _text(record.title, UNTITLED),
        "objective": _text(record.objective, NO_OBJECTIVE),
        "questions": _text(record.questions, EMPTY),
        "construct_validity": _scale(record.construct_validity),
        "internal_validity": _scale(record.internal_validity),
        "external_validity": _scale(record.external_validity),
        "replacement_available": _yes_no(record.replacement_available),
        "reduction_justified": _yes_no(record.reduction_justified),
        "refinement_implemented": _yes_no(record.refinement_implemented),
        "severity_grade": f"{record.severity_grade} ({SEVERITY_ANCHORS[record.severity_grade]})",
        "nonpathocentric_factors": [
            factor.label for factor in NonpathocentricFactor if factor in record.nonpathocentric_factors
        ],
        "societal_interests": [
            interest.label for interest in SocietalInterest if interest in record.societal_interests
        ],
        "anticipated_gain": _scale(record.anticipated_gain),
        "likelihood": _scale(record.likelihood),
        "empty_list": EMPTY,
    }
    context.update(score_context(result))
    return context


def render_template(template: ReportTemplate, variables: dict[str, Any]) -> str:
    """Render *template* with *variables*.

    Raises
    ------
    jinja2.UndefinedError
        If the template references a variable not in *variables*.
    """
    return _env.from_string(template.body).render(**variables)


def format_report(
    record: InputRecord,
    result: ScoreResult,
    *,
    template: str = DEFAULT_TEMPLATE,
    registry: TemplateRegistry | None = None,
) -> str:
    """Render the narrative weighing-of-interests report.

    Parameters
    ----------
    record : InputRecord
        Answers the result was computed from.
    result : ScoreResult
        Output of :func:`~indispensability_check.scorer.compute_scores`.
    template : str
        Registered template name.
    registry : TemplateRegistry | None
        Registry to look the template up in; the default registry if omitted.

    Returns
    -------
    str
        Markdown-like report. Identical inputs give identical output.
    """
    spec = (registry or default_registry()).get(template)
    return render_template(spec, report_context(record, result))


def format_scores(result: ScoreResult, *, registry: TemplateRegistry | None = None) -> str:
    """Render the short score panel: three scores and the decision text."""
    spec = (registry or default_registry()).get(SCORES_TEMPLATE)
    return render_template(spec, score_context(result))
