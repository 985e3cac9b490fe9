"""Report template discovery and registration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_BUILTIN_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class ReportTemplate:
    """Metadata and Jinja2 body of a report template.

    Parameters
    ----------
    name : str
        Unique template identifier.
    version : str
        Version string of the layout.
    description : str
        Human-readable description.
    body : str
        Jinja2 template text.
    """

    name: str
    version: str
    description: str = ""
    body: str = ""


def load_template_file(path: str | Path) -> ReportTemplate:
    """Load a YAML template spec.

    Parameters
    ----------
    path : str | Path
        Path to a ``.yaml`` file with ``name``, ``version``, ``description``
        and ``body`` keys.

    Returns
    -------
    ReportTemplate

    Raises
    ------
    ValueError
        If the file has no ``name`` or no ``body``.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as fh:
        data: dict[str, Any] = yaml.safe_load(fh) or {}

    for key in ("name", "body"):
        if not data.get(key):
            msg = f"Template {path} missing required field: {key!r}"
            raise ValueError(msg)

    return ReportTemplate(
        name=data["name"],
        version=str(data.get("version", "0.0")),
        description=data.get("description", ""),
        body=data["body"],
    )


class TemplateRegistry:
    """Discover, cache, and retrieve report templates.

    Parameters
    ----------
    extra_dirs : list[str | Path] | None
        Additional directories to scan for ``.yaml`` templates. Later
        directories override earlier ones, and all override the built-ins.
    """

    def __init__(self, extra_dirs: list[str | Path] | None = None) -> None:
        self._templates: dict[str, ReportTemplate] = {}
        self._scan(_BUILTIN_DIR)
        self.builtin_names: frozenset[str] = frozenset(self._templates)
        for d in extra_dirs or []:
            self._scan(Path(d))

    def _scan(self, directory: Path) -> None:
        """Scan *directory* for YAML report templates."""
        if not directory.is_dir():
            logger.warning("Template directory does not exist: %s", directory)
            return
        for path in sorted(directory.glob("*.yaml")):
            template = load_template_file(path)
            self._templates[template.name] = template
            logger.debug("Loaded template %s v%s from %s", template.name, template.version, path)

    def get(self, name: str) -> ReportTemplate:
        """Return a template by name.

        Raises
        ------
        KeyError
            If *name* is not found.
        """
        if name not in self._templates:
            available = ", ".join(sorted(self._templates)) or "(none)"
            msg = f"Unknown template {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._templates[name]

    def available(self) -> list[str]:
        """Return sorted list of registered template names."""
        return sorted(self._templates)

    def register(self, template: ReportTemplate) -> None:
        """Register a template programmatically."""
        self._templates[template.name] = template


_default_registry: TemplateRegistry | None = None


def default_registry() -> TemplateRegistry:
    """Return the process-wide registry, creating it on first access."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def register_template(template: ReportTemplate | str | Path) -> ReportTemplate:
    """Register a template object or YAML file with the default registry.

    Parameters
    ----------
    template : ReportTemplate | str | Path
        A template, or a path to a YAML template spec.

    Returns
    -------
    ReportTemplate
        The registered template.

    Raises
    ------
    ValueError
        If *template* would replace a built-in template.
    """
    if not isinstance(template, ReportTemplate):
        template = load_template_file(template)
    registry = default_registry()
    if template.name in registry.builtin_names:
        msg = f"Cannot replace built-in template {template.name!r}"
        raise ValueError(msg)
    registry.register(template)
    logger.debug("Registered template %r", template.name)
    return template


def load_template(name: str) -> ReportTemplate:
    """Return the template registered under *name* in the default registry."""
    return default_registry().get(name)


def list_templates() -> list[str]:
    """Return sorted names of templates in the default registry."""
    return default_registry().available()


def clear_template_registry() -> None:
    """Drop the default registry so built-ins are rescanned on next access.

    Intended for use in tests to ensure a clean state.
    """
    global _default_registry
    _default_registry = None
