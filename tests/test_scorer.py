"""Tests for the pure scoring logic and decision rule."""

from dataclasses import replace

import pytest

from indispensability_check.models import Decision, InputRecord, ValidationError
from indispensability_check.scorer import compute_scores, decide


def test_scenario_a_does_not_favour_approval(scenario_a):
    result = compute_scores(scenario_a)
    assert round(result.suitability_score, 2) == 2.67
    assert result.strain_score == 2.0
    assert round(result.interest_score, 2) == 1.58
    assert result.decision is Decision.DOES_NOT_FAVOUR_APPROVAL


def test_scenario_b_favours_approval(scenario_b):
    result = compute_scores(scenario_b)
    assert result.interest_score == 3.5
    assert result.decision is Decision.FAVOURS_APPROVAL


def test_replacement_short_circuits_but_scores_are_kept(scenario_b):
    result = compute_scores(replace(scenario_b, replacement_available=True))
    assert result.decision is Decision.NOT_JUSTIFIABLE
    assert result.interest_score == 3.5
    assert result.strain_score == 2.0


def test_factor_identity_does_not_matter(scenario_a):
    one = compute_scores(replace(scenario_a, nonpathocentric_factors=["humiliation_loss_of_control"]))
    other = compute_scores(replace(scenario_a, nonpathocentric_factors=["major_interference_appearance"]))
    assert one.strain_score == other.strain_score == 2.5


def test_zero_gain_collapses_product(scenario_a):
    result = compute_scores(replace(scenario_a, anticipated_gain=0, likelihood=3))
    assert result.interest_score == 0.25


def test_tie_favours_approval():
    record = InputRecord(
        construct_validity=1,
        internal_validity=1,
        external_validity=1,
        replacement_available=False,
        reduction_justified=True,
        refinement_implemented=True,
        severity_grade=1,
        anticipated_gain=3,
        likelihood=1,
    )
    result = compute_scores(record)
    assert result.interest_score == result.strain_score == 1.0
    assert result.decision is Decision.FAVOURS_APPROVAL_CONDITIONAL


def test_compute_scores_accepts_mapping(scenario_a_answers):
    assert compute_scores(scenario_a_answers).decision is Decision.DOES_NOT_FAVOUR_APPROVAL


def test_missing_field_raises_before_scoring(scenario_a_answers):
    del scenario_a_answers["refinement_implemented"]
    with pytest.raises(ValidationError, match="refinement_implemented"):
        compute_scores(scenario_a_answers)


def test_determinism(scenario_a):
    assert compute_scores(scenario_a) == compute_scores(scenario_a)


class TestDecide:
    """Ordered guards of the decision rule."""

    def test_threshold_met_but_reduction_missing_is_conditional(self):
        decision = decide(
            1.5, 2.0, 2.0, replacement_available=False, reduction_justified=False, refinement_implemented=True
        )
        assert decision is Decision.FAVOURS_APPROVAL_CONDITIONAL

    def test_threshold_is_inclusive(self):
        decision = decide(
            1.5, 2.0, 2.0, replacement_available=False, reduction_justified=True, refinement_implemented=True
        )
        assert decision is Decision.FAVOURS_APPROVAL

    def test_low_suitability_is_conditional(self):
        decision = decide(
            1.0, 1.0, 3.0, replacement_available=False, reduction_justified=True, refinement_implemented=True
        )
        assert decision is Decision.FAVOURS_APPROVAL_CONDITIONAL

    def test_interest_below_strain(self):
        decision = decide(
            3.0, 3.0, 2.99, replacement_available=False, reduction_justified=True, refinement_implemented=True
        )
        assert decision is Decision.DOES_NOT_FAVOUR_APPROVAL

    def test_replacement_wins_over_everything(self):
        decision = decide(
            3.0, 0.0, 4.0, replacement_available=True, reduction_justified=True, refinement_implemented=True
        )
        assert decision is Decision.NOT_JUSTIFIABLE

