"""Shared fixtures for checker tests."""

import json

import pytest

from indispensability_check.models import InputRecord


@pytest.fixture()
def scenario_a_answers():
    """Strong design, moderate severity, modest gain: strain outweighs interest."""
    return {
        "title": "Targeted therapy response in murine model",
        "objective": "Assess tumour response to a targeted inhibitor.",
        "questions": "",
        "construct_validity": 3,
        "internal_validity": 3,
        "external_validity": 2,
        "replacement_available": False,
        "reduction_justified": True,
        "refinement_implemented": True,
        "severity_grade": 2,
        "nonpathocentric_factors": [],
        "societal_interests": ["life_health"],
        "anticipated_gain": 2,
        "likelihood": 2,
    }


@pytest.fixture()
def scenario_a(scenario_a_answers):
    return InputRecord.from_mapping(scenario_a_answers)


@pytest.fixture()
def scenario_b(scenario_a_answers):
    """Scenario A with maximal gain and likelihood and two interests."""
    answers = dict(scenario_a_answers, anticipated_gain=3, likelihood=3, societal_interests=["life_health", "3r_methods"])
    return InputRecord.from_mapping(answers)


@pytest.fixture()
def blank_record():
    """Valid scalar answers with every free-text and list field empty."""
    return InputRecord(
        construct_validity=0,
        internal_validity=0,
        external_validity=0,
        replacement_available=False,
        reduction_justified=False,
        refinement_implemented=False,
        severity_grade=0,
        anticipated_gain=0,
        likelihood=0,
    )


@pytest.fixture()
def answers_file(tmp_path, scenario_a_answers):
    """JSON answers file for scenario A."""
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(scenario_a_answers), encoding="utf-8")
    return path
