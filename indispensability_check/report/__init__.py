"""Narrative report rendering with named Jinja2 templates."""

from indispensability_check.report.registry import (
    ReportTemplate,
    TemplateRegistry,
    clear_template_registry,
    list_templates,
    load_template,
    register_template,
)
from indispensability_check.report.renderer import DEFAULT_TEMPLATE, format_report, format_scores

__all__ = [
    "DEFAULT_TEMPLATE",
    "ReportTemplate",
    "TemplateRegistry",
    "clear_template_registry",
    "format_report",
    "format_scores",
    "list_templates",
    "load_template",
    "register_template",
]
