"""Domain models for the weighing of interests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

SCALE_ANCHORS: dict[int, str] = {
    0: "Absent/not justified",
    1: "Minimal/weak",
    2: "Moderate/partial",
    3: "Strong/robust",
}

SEVERITY_ANCHORS: dict[int, str] = {
    0: "none",
    1: "mild",
    2: "moderate",
    3: "severe",
}

SCALE_FIELDS: tuple[str, ...] = (
    "construct_validity",
    "internal_validity",
    "external_validity",
    "severity_grade",
    "anticipated_gain",
    "likelihood",
)

FLAG_FIELDS: tuple[str, ...] = (
    "replacement_available",
    "reduction_justified",
    "refinement_implemented",
)

TEXT_FIELDS: tuple[str, ...] = ("title", "objective", "questions")

REQUIRED_FIELDS: tuple[str, ...] = SCALE_FIELDS + FLAG_FIELDS

_TRUE_STRINGS = frozenset({"yes", "true", "1"})
_FALSE_STRINGS = frozenset({"no", "false", "0"})


class ValidationError(ValueError):
    """A required field is missing or outside its domain.

    Parameters
    ----------
    message : str
        Human-readable description.
    fields : Iterable[str]
        Names of the offending fields.
    """

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.fields: tuple[str, ...] = tuple(fields)


class ExportError(OSError):
    """Writing the report to its destination failed."""


class NonpathocentricFactor(Enum):
    """Strain on animal dignity that is not experienced as pain."""

    EXCESSIVE_INSTRUMENTALIZATION = "excessive_instrumentalization"
    HUMILIATION_LOSS_OF_CONTROL = "humiliation_loss_of_control"
    MAJOR_INTERFERENCE_APPEARANCE = "major_interference_appearance"

    @property
    def label(self) -> str:
        return _FACTOR_LABELS[self]


class SocietalInterest(Enum):
    """Legitimate societal interest an experiment may serve."""

    LIFE_HEALTH = "life_health"
    FUNDAMENTAL_KNOWLEDGE = "fundamental_knowledge"
    ENVIRONMENT = "environment"
    THREE_R_METHODS = "3r_methods"

    @property
    def label(self) -> str:
        return _INTEREST_LABELS[self]


_FACTOR_LABELS: dict[NonpathocentricFactor, str] = {
    NonpathocentricFactor.EXCESSIVE_INSTRUMENTALIZATION: "Excessive instrumentalisation",
    NonpathocentricFactor.HUMILIATION_LOSS_OF_CONTROL: "Humiliation / substantial loss of control",
    NonpathocentricFactor.MAJOR_INTERFERENCE_APPEARANCE: "Major interference with appearance/abilities",
}

_INTEREST_LABELS: dict[SocietalInterest, str] = {
    SocietalInterest.LIFE_HEALTH: "Preservation/Protection of life & health (humans/animals)",
    SocietalInterest.FUNDAMENTAL_KNOWLEDGE: "New knowledge on fundamental biological processes",
    SocietalInterest.ENVIRONMENT: "Protection of the natural environment",
    SocietalInterest.THREE_R_METHODS: "Advances in 3R methods (Replace/Reduce/Refine)",
}


class Decision(Enum):
    """Suggested outcome of the weighing of interests."""

    NOT_JUSTIFIABLE = "not_justifiable"
    FAVOURS_APPROVAL = "favours_approval"
    FAVOURS_APPROVAL_CONDITIONAL = "favours_approval_conditional"
    DOES_NOT_FAVOUR_APPROVAL = "does_not_favour_approval"

    @property
    def text(self) -> str:
        """Fixed explanatory sentence shown in reports."""
        return DECISION_TEXTS[self]


DECISION_TEXTS: dict[Decision, str] = {
    Decision.NOT_JUSTIFIABLE: (
        "NOT JUSTIFIABLE — a fit-for-purpose non-animal alternative was indicated (Replace)."
    ),
    Decision.FAVOURS_APPROVAL: (
        "FAVOURS APPROVAL — anticipated gain appears proportionate to strain, "
        "with acceptable suitability and application of 3Rs."
    ),
    Decision.FAVOURS_APPROVAL_CONDITIONAL: (
        "FAVOURS APPROVAL (conditional) — proportionate on balance; "
        "strengthen suitability and 3R implementation."
    ),
    Decision.DOES_NOT_FAVOUR_APPROVAL: (
        "DOES NOT FAVOUR APPROVAL — anticipated gain does not outweigh expected strain."
    ),
}


def _members(enum_cls: type[Enum], values: Any, name: str) -> frozenset:
    """Normalise *values* to a frozenset of *enum_cls* members."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        msg = f"{name} must be a collection of {enum_cls.__name__} values, got {values!r}"
        raise ValidationError(msg, [name])
    members = set()
    for value in values:
        if isinstance(value, enum_cls):
            members.add(value)
            continue
        try:
            members.add(enum_cls(value))
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            msg = f"{name} contains unknown value {value!r}. Allowed: {allowed}"
            raise ValidationError(msg, [name]) from None
    return frozenset(members)


@dataclass(frozen=True)
class InputRecord:
    """Answers describing a proposed animal experiment.

    Parameters
    ----------
    construct_validity, internal_validity, external_validity : int
        Suitability anchors on the 0-3 scale.
    replacement_available : bool
        A validated, fit-for-purpose non-animal alternative exists (Replace).
    reduction_justified : bool
        Sample size and design avoid under- or over-use (Reduce).
    refinement_implemented : bool
        Strain-minimising measures are built in (Refine).
    severity_grade : int
        Prospective severity grade, 0 (none) to 3 (severe).
    anticipated_gain, likelihood : int
        Anticipated knowledge gain and likelihood of achieving the
        objectives on the 0-3 scale.
    nonpathocentric_factors : frozenset[NonpathocentricFactor]
        Selected non-pathocentric strain elements. Strings are accepted
        and converted.
    societal_interests : frozenset[SocietalInterest]
        Selected societal interests. Strings are accepted and converted.
    title, objective, questions : str
        Free-text project description, may be empty.

    Raises
    ------
    ValidationError
        If any field is outside its domain.
    """

    construct_validity: int
    internal_validity: int
    external_validity: int
    replacement_available: bool
    reduction_justified: bool
    refinement_implemented: bool
    severity_grade: int
    anticipated_gain: int
    likelihood: int
    nonpathocentric_factors: frozenset[NonpathocentricFactor] = field(default_factory=frozenset)
    societal_interests: frozenset[SocietalInterest] = field(default_factory=frozenset)
    title: str = ""
    objective: str = ""
    questions: str = ""

    def __post_init__(self) -> None:
        for name in SCALE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 3:
                msg = f"{name} must be an integer between 0 and 3, got {value!r}"
                raise ValidationError(msg, [name])
        for name in FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be True or False, got {value!r}"
                raise ValidationError(msg, [name])
        for name in TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                msg = f"{name} must be a string, got {type(value).__name__}"
                raise ValidationError(msg, [name])
        object.__setattr__(
            self,
            "nonpathocentric_factors",
            _members(NonpathocentricFactor, self.nonpathocentric_factors, "nonpathocentric_factors"),
        )
        object.__setattr__(
            self,
            "societal_interests",
            _members(SocietalInterest, self.societal_interests, "societal_interests"),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> InputRecord:
        """Build a record from loosely typed form or file answers.

        Scale values may be digit strings; flags may be ``"yes"``/``"no"``,
        ``"true"``/``"false"`` or ``0``/``1``. List fields may be omitted.

        Parameters
        ----------
        data : Mapping[str, Any]
            Raw answers keyed by field name.

        Returns
        -------
        InputRecord

        Raises
        ------
        ValidationError
            If required fields are missing (all are reported at once) or a
            value cannot be interpreted.
        """
        if not isinstance(data, Mapping):
            msg = f"Answers must be a mapping, got {type(data).__name__}"
            raise ValidationError(msg)

        missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            msg = f"Missing required field(s): {', '.join(missing)}"
            raise ValidationError(msg, missing)

        kwargs: dict[str, Any] = {}
        for name in SCALE_FIELDS:
            kwargs[name] = _coerce_scale(data[name], name)
        for name in FLAG_FIELDS:
            kwargs[name] = _coerce_flag(data[name], name)
        for name in TEXT_FIELDS:
            value = data.get(name)
            kwargs[name] = "" if value is None else value
        kwargs["nonpathocentric_factors"] = data.get("nonpathocentric_factors") or ()
        kwargs["societal_interests"] = data.get("societal_interests") or ()
        return cls(**kwargs)


def _coerce_scale(value: Any, name: str) -> Any:
    """Accept decimal strings for 0-3 scale answers; range is checked by the record."""
    if isinstance(value, str) and value.strip().isdecimal():
        try:
            return int(value.strip())
        except ValueError:
            msg = f"{name} must be an integer between 0 and 3, got {value!r}"
            raise ValidationError(msg, [name]) from None
    return value


def _coerce_flag(value: Any, name: str) -> bool:
    """Interpret a yes/no answer."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    msg = f"{name} must be a yes/no answer, got {value!r}"
    raise ValidationError(msg, [name])


@dataclass(frozen=True)
class ScoreResult:
    """Scores and decision derived from one :class:`InputRecord`.

    Parameters
    ----------
    suitability_score : float
        Mean of the three validity anchors, between 0 and 3.
    strain_score : float
        Severity plus non-pathocentric contributions, between 0 and 4.5.
    interest_score : float
        Weighted gain and societal interest contributions, between 0 and 4.
    decision : Decision
        Suggested outcome.
    """

    suitability_score: float
    strain_score: float
    interest_score: float
    decision: Decision

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return {
            "suitability_score": self.suitability_score,
            "strain_score": self.strain_score,
            "interest_score": self.interest_score,
            "decision": self.decision.name,
            "decision_text": self.decision.text,
        }
