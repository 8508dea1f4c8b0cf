"""Wizard navigation: per-step required fields and the hand-off contract to the prompt builder."""

from dataclasses import dataclass, field

from ..generation.errors import InvalidInput
from .schemas import LetterRequest, LetterType

TOTAL_STEPS = 5

STEP_TITLES = {
    1: "Letter type",
    2: "Recommender",
    3: "Applicant",
    4: "Recipient & details",
    5: "Personalisation",
}

# Fields that must be non-blank before leaving a step
REQUIRED_FIELDS = {
    1: ["letter_type"],
    2: ["rec_first_name", "rec_last_name", "rec_title", "rec_org"],
    3: ["applicant_first_name", "applicant_last_name"],
}

_LETTER_TYPES = {t.value for t in LetterType}


@dataclass
class WizardStep:
    step: int
    missing: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.missing


def _text(form: dict, name: str) -> str | None:
    """Form value as a string, or None when it is absent or not a scalar."""
    value = form.get(name)
    value = getattr(value, "value", value)
    if value is None or isinstance(value, (list, dict, set, tuple)):
        return None
    return str(value).strip()


def _blank(form: dict, name: str) -> bool:
    return not _text(form, name)


def missing_fields(step: int, form: dict) -> list[str]:
    """Required fields of ``step`` that are blank or invalid in ``form``."""
    missing = [name for name in REQUIRED_FIELDS.get(step, []) if _blank(form, name)]
    if step == 1 and "letter_type" not in missing and _text(form, "letter_type") not in _LETTER_TYPES:
        missing.append("letter_type")
    if step == 2 and _text(form, "relationship") == "other" and _blank(form, "relationship_other"):
        missing.append("relationship_other")
    return missing


def advance(step: int, form: dict) -> WizardStep:
    """Next step when the current one is complete, otherwise stay and report what is missing."""
    step = min(max(step, 1), TOTAL_STEPS)
    missing = missing_fields(step, form)
    if missing:
        return WizardStep(step=step, missing=missing)
    return WizardStep(step=min(step + 1, TOTAL_STEPS))


def back(step: int) -> int:
    return max(step - 1, 1)


def ensure_ready(request: LetterRequest) -> None:
    """Check the guarantees the prompt builder relies on."""
    if request.letter_type.value not in _LETTER_TYPES:
        raise InvalidInput("Unknown letter type")
    if not request.applicant_first_name.strip() or not request.applicant_last_name.strip():
        raise InvalidInput("Applicant first and last name are required")
    if request.relationship.value == "other" and not request.relationship_other.strip():
        raise InvalidInput("Please describe the relationship")
