"""Write narrative reports to disk."""

from __future__ import annotations

import logging
import os
import re
import stat
import tempfile
from pathlib import Path

from indispensability_check.models import ExportError, InputRecord, ScoreResult
from indispensability_check.report import format_report

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "weighing_of_interests_"
FALLBACK_STEM = "project"

_NON_ALNUM = re.compile(r"[\W_]+")


def report_filename(title: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Return the deterministic report filename for a project title.

    Each run of non-alphanumeric characters in the lower-cased title becomes
    a single underscore. Unicode letters and digits are kept. An empty
    result falls back to ``"project"``.

    Examples
    --------
    >>> report_filename("Targeted therapy: murine model")
    'weighing_of_interests_targeted_therapy_murine_model.txt'
    >>> report_filename("")
    'weighing_of_interests_project.txt'
    """
    stem = _NON_ALNUM.sub("_", title.lower()).strip("_") or FALLBACK_STEM
    return f"{prefix}{stem}.txt"


def _target_mode(path: Path) -> int:
    """Permission bits for *path*: kept if it exists, else 0o666 masked by the umask."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: str | Path, text: str, *, encoding: str = "utf-8") -> Path:
    """Write *text* to *path* via a temporary sibling and an atomic rename.

    The written file gets the mode of the file it replaces, or the umask
    default for a new file.

    Raises
    ------
    ExportError
        If the destination cannot be written. No partial file is left at
        *path* and the temporary file is removed.
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except (OSError, UnicodeError) as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        msg = f"Could not write report to {path}: {exc}"
        raise ExportError(msg) from exc
    logger.debug("Wrote report to %s", path)
    return path


def export_report(
    record: InputRecord,
    result: ScoreResult,
    directory: str | Path = ".",
    *,
    prefix: str = DEFAULT_PREFIX,
    encoding: str = "utf-8",
    report: str | None = None,
) -> Path:
    """Write the narrative report for *record* into *directory*.

    Parameters
    ----------
    record : InputRecord
        Answers the result was computed from.
    result : ScoreResult
        Computed scores.
    directory : str | Path
        Destination directory; must exist.
    prefix : str
        Filename prefix, see :func:`report_filename`.
    encoding : str
        Text encoding of the file.
    report : str | None
        Already rendered report text; rendered with the default template
        if omitted.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    ExportError
        If *directory* is missing or the file cannot be written.
    """
    directory = Path(directory)
    if not directory.is_dir():
        msg = f"Export directory does not exist: {directory}"
        raise ExportError(msg)

    text = format_report(record, result) if report is None else report
    return write_text_atomic(directory / report_filename(record.title, prefix), text, encoding=encoding)
