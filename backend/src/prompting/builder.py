"""Prompt builder: turns a wizard form into the single prompt sent to the completion API.

Assembly is an ordered list of fragments, each step appending at most one
sentence. Empty fragments are dropped before joining with single spaces,
so optional fields never leave holes in the prompt. Random choices
(anecdote, praise, metric, closing line) all go through the ``RandomSource``
passed in, which makes the output reproducible under a fixed seed.
"""

import re
from collections.abc import Callable

from ..config import settings
from ..integrations.storage import document_url
from ..letters.schemas import LetterRequest
from .banks import (
    ANECDOTES,
    CLOSING_LINES,
    CLOSING_NUDGES,
    bank_for,
    known_time_phrase,
    language_name,
    letter_type_key,
    opening_style_name,
    perspective_phrase,
    relationship_label,
    tone_name,
)
from .metrics import metric_phrase, praise_phrase, resolve_percentage
from .random_source import RandomSource, SeededRandom

_SKILL_SEPARATORS = re.compile(r"[,;]")
_DOCUMENT_PREFIX = "Applicant CV/Resume content: "

# letter type -> (form field, sentence template)
_TYPE_FACTS: dict[str, tuple[str, str]] = {
    "scholarship": ("gpa", "Applicant GPA: {}."),
    "immigration": ("visa_type", "Visa type: {}."),
    "tenant": ("rental_address", "Rental property: {}."),
    "medical": ("residency_specialty", "Residency specialty: {}."),
}


class PromptBuildError(ValueError):
    """The form is missing data the prompt cannot be built without."""


def _full_name(first: str, last: str) -> str:
    return f"{first.strip()} {last.strip()}".strip()


def _human_join(items: list[str]) -> str:
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


def split_skills(raw: str) -> list[str]:
    """Split a free-text skills field on commas/semicolons into trimmed tokens."""
    return [token.strip() for token in _SKILL_SEPARATORS.split(raw or "") if token.strip()]


def _header(req: LetterRequest) -> str:
    return f"Write a {letter_type_key(req.letter_type)} recommendation letter in {language_name(req.language)}."


def _recommender(req: LetterRequest) -> str:
    head = _full_name(req.rec_first_name, req.rec_last_name)
    if req.rec_title:
        head = f"{head}, {req.rec_title}" if head else req.rec_title
    if req.rec_org:
        head = f"{head} at {req.rec_org}" if head else f"at {req.rec_org}"

    clauses = [head] if head else []
    if req.rec_address:
        clauses.append(f"Address: {req.rec_address}")
    clauses.append(f"Relationship: {relationship_label(req.relationship, req.relationship_other)}")
    clauses.append(f"known for {known_time_phrase(req.known_time)}")
    return f"Recommender: {', '.join(clauses)}."


def _applicant(req: LetterRequest) -> str:
    if not req.applicant_first_name.strip() or not req.applicant_last_name.strip():
        raise PromptBuildError("Applicant first and last name are required")
    line = f"Applicant: {_full_name(req.applicant_first_name, req.applicant_last_name)}"
    if req.applicant_sex:
        line += f" ({req.applicant_sex})"
    if req.applicant_position:
        line += f", applying for {req.applicant_position}"
    return line + "."


def _recipient(req: LetterRequest) -> str:
    if not req.recipient_name:
        return ""
    if req.recipient_position:
        return f"Address the letter to {req.recipient_name}, {req.recipient_position}."
    return f"Address the letter to {req.recipient_name}."


def _skills(req: LetterRequest) -> str:
    skills = split_skills(req.skills_and_qualities)
    if not skills:
        return ""
    return f"In particular, they demonstrated {_human_join(skills)}, which translated into tangible results."


def _type_facts(req: LetterRequest) -> str:
    fact = _TYPE_FACTS.get(letter_type_key(req.letter_type))
    if not fact:
        return ""
    field, template = fact
    value = (getattr(req, field, "") or "").strip()
    return template.format(value) if value else ""


def _personalisation(req: LetterRequest) -> str:
    formality = min(max(int(req.formality), 0), 2)
    return (
        f"Tone preset: {tone_name(req.tone_preset)}; Formality level: {formality} (0 casual → 2 formal). "
        f"Desired length ≈ {req.length_words} words. Opening style: {opening_style_name(req.opening_style)}. "
        f"Perspective: {perspective_phrase(req.perspective)}."
    )


def _writing_style(req: LetterRequest) -> str:
    tags = [str(getattr(tag, "value", tag)) for tag in req.style_tags]
    return f"Writing style: {', '.join(tags)}." if tags else ""


def _inline_document(text: str, room: int) -> str:
    """Document text sentence cut to ``room`` characters, or "" when it cannot fit."""
    room -= len(_DOCUMENT_PREFIX) + 1
    if room <= 0:
        return ""
    return f"{_DOCUMENT_PREFIX}{text[:room].rstrip()}."


def build_prompt(
    request: LetterRequest,
    document_text: str | None = None,
    document_ref: str | None = None,
    *,
    rng: RandomSource | None = None,
    bucket: str | None = None,
    region: str | None = None,
    max_chars: int | None = None,
) -> str:
    """Build the prompt string for one letter request.

    ``document_ref`` is an object-storage key and takes precedence over
    ``document_text`` (text read from a local file). Inline text is cut
    so the whole prompt stays within ``max_chars`` (default
    ``settings.max_prompt_size``) and dropped when nothing fits. Raises
    ``PromptBuildError`` when the applicant name is incomplete.
    """
    rng = rng or SeededRandom()
    letter_type = letter_type_key(request.letter_type)

    def attachment() -> str:
        # inline document text is fitted once the rest of the prompt is known
        if document_ref and document_ref.strip():
            url = document_url(
                document_ref.strip(),
                bucket=bucket if bucket is not None else settings.s3_bucket,
                region=region if region is not None else settings.s3_region,
            )
            return f"Supporting document: {url}"
        return ""

    def additional_context() -> str:
        return f"Additional context: {request.additional_context}." if request.additional_context else ""

    def anecdote() -> str:
        if not request.include_anecdote:
            return ""
        return f"Include a short anecdote about {rng.pick(bank_for(ANECDOTES, letter_type))}."

    def praise() -> str:
        return f"Highlight that the applicant is {praise_phrase(letter_type, rng)}."

    def metrics() -> str:
        if not request.include_metrics:
            return ""
        pct = resolve_percentage(rng, request.skills_and_qualities, request.additional_context)
        return (
            f"Use specific metrics appropriate for a {letter_type} letter, "
            f"such as {metric_phrase(letter_type, pct, rng)}."
        )

    def closing_nudge() -> str:
        return CLOSING_NUDGES.get(letter_type, "")

    def creativity() -> str:
        return f"Creativity/temperature: {request.creativity}."

    def grammar() -> str:
        return "After composing, run a grammar-check pass." if request.grammar_check else ""

    def closing_line() -> str:
        return f'Close with a line such as: "{rng.pick(bank_for(CLOSING_LINES, letter_type))}"'

    steps: list[Callable[[], str]] = [
        lambda: _header(request),
        lambda: _recommender(request),
        lambda: _applicant(request),
        lambda: _recipient(request),
        lambda: _skills(request),
        lambda: _type_facts(request),
        attachment,
        additional_context,
        lambda: _personalisation(request),
        lambda: _writing_style(request),
        anecdote,
        praise,
        metrics,
        closing_nudge,
        creativity,
        grammar,
        closing_line,
    ]

    fragments = [fragment.strip() for fragment in (step() for step in steps)]
    slot = steps.index(attachment)
    if not fragments[slot] and document_text and document_text.strip():
        used = len(" ".join(fragment for fragment in fragments if fragment))
        limit = max_chars if max_chars is not None else settings.max_prompt_size
        fragments[slot] = _inline_document(document_text.strip(), limit - used - 1)
    return " ".join(fragment for fragment in fragments if fragment)
