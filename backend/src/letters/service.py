"""Letter service: prompt assembly for wizard submissions, queries, and Word export."""

import io
import re
from uuid import UUID

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt
from sqlalchemy.orm import Session

from ..generation.errors import InvalidInput
from ..prompting.builder import PromptBuildError, build_prompt
from ..prompting.random_source import RandomSource
from .models import GeneratedLetter
from .schemas import (
    LETTER_TYPE_CATALOG,
    KnownTime,
    Language,
    LetterRequest,
    OpeningStyle,
    Perspective,
    Relationship,
    TonePreset,
    WritingStyle,
)
from .wizard import ensure_ready

EXPORT_FILENAME = "Recommendation_Letter.docx"


def prompt_for_request(
    request: LetterRequest,
    document_key: str = "",
    document_text: str = "",
    rng: RandomSource | None = None,
) -> str:
    """Validate a wizard submission and build its prompt."""
    ensure_ready(request)
    try:
        return build_prompt(request, document_text or None, document_key or None, rng=rng)
    except PromptBuildError as exc:
        raise InvalidInput(str(exc)) from exc


def get_letter_for_user(db: Session, letter_id: str, user_id: UUID) -> GeneratedLetter | None:
    """Fetch a letter by its UUID, scoped to its owner."""
    try:
        uid = UUID(letter_id)
    except (ValueError, AttributeError):
        return None
    return (
        db.query(GeneratedLetter)
        .filter(GeneratedLetter.id == uid, GeneratedLetter.user_id == user_id)
        .first()
    )


def list_letters(db: Session, user_id: UUID, limit: int = 50) -> list[GeneratedLetter]:
    return (
        db.query(GeneratedLetter)
        .filter(GeneratedLetter.user_id == user_id)
        .order_by(GeneratedLetter.created_at.desc())
        .limit(limit)
        .all()
    )


def letter_to_dict(letter: GeneratedLetter) -> dict:
    return {
        "id": str(letter.id),
        "content": letter.content or "",
        "model_used": letter.model_used or "",
        "created_at": letter.created_at.isoformat() if letter.created_at else "",
    }


def letter_options() -> dict:
    """Catalogs the wizard renders its controls from."""
    return {
        "letter_types": [
            {"value": t.value, "label": label, "group": group.value} for t, label, group in LETTER_TYPE_CATALOG
        ],
        "relationships": [r.value for r in Relationship],
        "known_times": [k.value for k in KnownTime],
        "languages": [lang.value for lang in Language],
        "tone_presets": [t.value for t in TonePreset],
        "opening_styles": [o.value for o in OpeningStyle],
        "perspectives": [p.value for p in Perspective],
        "writing_styles": [w.value for w in WritingStyle],
    }


def build_docx(letter: GeneratedLetter) -> tuple[io.BytesIO, str]:
    """Generate a formatted DOCX from a generated letter.

    Returns an in-memory buffer ready to be sent as a response, and the filename.
    """
    doc = Document()

    for section in doc.sections:
        section.top_margin = Cm(2.5)
        section.bottom_margin = Cm(2.5)
        section.left_margin = Cm(2.5)
        section.right_margin = Cm(2.5)

    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)
    pf = style.paragraph_format
    pf.space_before = Pt(0)
    pf.space_after = Pt(10)
    pf.line_spacing = 1.15

    content = (letter.content or "").replace("\\n", "\n")
    for line in re.split(r"\n+", content.strip()):
        cleaned = line.strip()
        if not cleaned:
            continue
        p = doc.add_paragraph(cleaned)
        p.alignment = WD_ALIGN_PARAGRAPH.JUSTIFY

    buf = io.BytesIO()
    doc.save(buf)
    buf.seek(0)
    return buf, EXPORT_FILENAME
