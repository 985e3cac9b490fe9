"""Answers file reader: build input records from YAML or JSON answers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from indispensability_check.models import InputRecord, ValidationError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_answers(path: str | Path) -> dict[str, Any]:
    """Read an answers file into a mapping.

    Parameters
    ----------
    path : str | Path
        ``.yaml``, ``.yml`` or ``.json`` file keyed by field name.

    Returns
    -------
    dict[str, Any]
        Raw answers, not yet validated.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValidationError
        If the document is not a mapping.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Answers file not found: {path}"
        raise FileNotFoundError(msg)

    with open(path, encoding="utf-8") as fh:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(fh)
        else:
            data = json.load(fh)

    if not isinstance(data, dict):
        msg = f"Answers file {path} must contain a mapping, got {type(data).__name__}"
        raise ValidationError(msg)

    logger.debug("Loaded %d answers from %s", len(data), path)
    return data


def load_input_record(path: str | Path) -> InputRecord:
    """Read and validate an answers file.

    Parameters
    ----------
    path : str | Path
        Answers file, see :func:`load_answers`.

    Returns
    -------
    InputRecord

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValidationError
        If required answers are missing or out of domain.
    """
    return InputRecord.from_mapping(load_answers(path))
