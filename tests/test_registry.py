"""Tests for report template discovery and registration."""

import pytest

from indispensability_check.report import (
    ReportTemplate,
    TemplateRegistry,
    clear_template_registry,
    format_report,
    list_templates,
    load_template,
    register_template,
)
from indispensability_check.report.registry import load_template_file
from indispensability_check.scorer import compute_scores


@pytest.fixture()
def clean_registry():
    clear_template_registry()
    yield
    clear_template_registry()


@pytest.fixture()
def template_dir(tmp_path):
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "brief.yaml").write_text(
        'name: brief\nversion: "2.0"\ndescription: Brief\nbody: |\n  {{ title }}\n',
        encoding="utf-8",
    )
    return directory


def test_builtin_templates_loaded():
    registry = TemplateRegistry()
    assert registry.available() == ["score_summary", "weighing_of_interests"]


def test_get_builtin_template():
    template = TemplateRegistry().get("weighing_of_interests")
    assert template.version == "0.6"
    assert template.body.startswith("# Weighing of Interests")


def test_get_unknown_raises():
    with pytest.raises(KeyError, match="Available: score_summary, weighing_of_interests"):
        TemplateRegistry().get("nonexistent_template_xyz")


def test_extra_dirs_are_scanned(template_dir):
    registry = TemplateRegistry([template_dir])
    template = registry.get("brief")
    assert template.version == "2.0"
    assert template.body == "{{ title }}\n"


def test_missing_extra_dir_is_skipped(tmp_path, caplog):
    registry = TemplateRegistry([tmp_path / "absent"])
    assert "weighing_of_interests" in registry.available()
    assert "Template directory does not exist" in caplog.text


def test_template_file_without_body_raises(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("name: empty\n", encoding="utf-8")
    with pytest.raises(ValueError, match="'body'"):
        load_template_file(path)


def test_register_object(clean_registry):
    register_template(ReportTemplate(name="custom", version="1.1", body="x"))
    assert "custom" in list_templates()
    assert load_template("custom").version == "1.1"


def test_register_file(clean_registry, template_dir):
    template = register_template(template_dir / "brief.yaml")
    assert template.name == "brief"
    assert load_template("brief") == template


def test_clear_restores_builtins(clean_registry):
    register_template(ReportTemplate(name="temporary", version="1.0", body="x"))
    clear_template_registry()
    assert list_templates() == ["score_summary", "weighing_of_interests"]


@pytest.mark.parametrize("name", ["weighing_of_interests", "score_summary"])
def test_builtin_templates_cannot_be_replaced(clean_registry, name):
    with pytest.raises(ValueError, match="Cannot replace built-in template"):
        register_template(ReportTemplate(name=name, version="9.9", body="replaced"))
    assert load_template(name).version == "0.6"


def test_default_report_unaffected_by_registrations(clean_registry, scenario_a):
    result = compute_scores(scenario_a)
    before = format_report(scenario_a, result)
    with pytest.raises(ValueError):
        register_template(ReportTemplate(name="weighing_of_interests", version="9.9", body="replaced"))
    assert format_report(scenario_a, result) == before
