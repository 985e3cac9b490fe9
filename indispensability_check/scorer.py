"""Pure evaluation logic: suitability, strain and interest scores plus the decision rule."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from indispensability_check.models import Decision, InputRecord, ScoreResult

logger = logging.getLogger(__name__)

NONPATHOCENTRIC_WEIGHT = 0.5
INTEREST_WEIGHT = 0.25
SUITABILITY_THRESHOLD = 1.5


def suitability_score(record: InputRecord) -> float:
    """Return the mean of the construct, internal and external validity anchors."""
    return (record.construct_validity + record.internal_validity + record.external_validity) / 3.0


def strain_score(record: InputRecord) -> float:
    """Return severity plus a flat weight per selected non-pathocentric factor."""
    return record.severity_grade + NONPATHOCENTRIC_WEIGHT * len(record.nonpathocentric_factors)


def interest_score(record: InputRecord) -> float:
    """Return gain times likelihood over three plus a flat weight per societal interest."""
    return (record.anticipated_gain * record.likelihood) / 3.0 + INTEREST_WEIGHT * len(record.societal_interests)


def decide(
    suitability: float,
    strain: float,
    interest: float,
    *,
    replacement_available: bool,
    reduction_justified: bool,
    refinement_implemented: bool,
) -> Decision:
    """Apply the ordered decision guards; the first match wins.

    Parameters
    ----------
    suitability : float
        Suitability score.
    strain : float
        Strain score.
    interest : float
        Interest score.
    replacement_available : bool
        A non-animal alternative exists. Overrides every score.
    reduction_justified : bool
        Reduce answered yes.
    refinement_implemented : bool
        Refine answered yes.

    Returns
    -------
    Decision
    """
    if replacement_available:
        return Decision.NOT_JUSTIFIABLE
    if interest >= strain:
        if suitability >= SUITABILITY_THRESHOLD and reduction_justified and refinement_implemented:
            return Decision.FAVOURS_APPROVAL
        return Decision.FAVOURS_APPROVAL_CONDITIONAL
    return Decision.DOES_NOT_FAVOUR_APPROVAL


def compute_scores(record: InputRecord | Mapping[str, Any]) -> ScoreResult:
    """Score a proposed experiment.

    Parameters
    ----------
    record : InputRecord | Mapping[str, Any]
        Validated answers. A mapping is validated through
        :meth:`InputRecord.from_mapping` first.

    Returns
    -------
    ScoreResult
        All three scores, computed even when replacement short-circuits the
        decision.

    Raises
    ------
    ValidationError
        If a mapping is missing required fields or holds out-of-domain values.
    """
    if not isinstance(record, InputRecord):
        record = InputRecord.from_mapping(record)

    suitability = suitability_score(record)
    strain = strain_score(record)
    interest = interest_score(record)
    decision = decide(
        suitability,
        strain,
        interest,
        replacement_available=record.replacement_available,
        reduction_justified=record.reduction_justified,
        refinement_implemented=record.refinement_implemented,
    )

    logger.debug(
        "Scored suitability=%.2f strain=%.2f interest=%.2f decision=%s",
        suitability,
        strain,
        interest,
        decision.name,
    )
    return ScoreResult(
        suitability_score=suitability,
        strain_score=strain,
        interest_score=interest,
        decision=decision,
    )
