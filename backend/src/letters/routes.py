"""Letter routes: wizard support, prompt preview, generation from the form, history and export."""

from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session

from ..audit.service import audit
from ..auth.models import User
from ..config import settings
from ..database import get_db
from ..dependencies import get_current_user, get_generator
from ..generation.routes import run_generation
from ..generation.service import LetterGenerator
from ..integrations.documents import DocumentError, extract_text
from ..rate_limit import limiter
from .schemas import LetterGenerateRequest, WizardStepRequest
from .service import (
    build_docx,
    get_letter_for_user,
    letter_options,
    letter_to_dict,
    list_letters,
    prompt_for_request,
)
from .wizard import STEP_TITLES, TOTAL_STEPS, WizardStep, advance, back

router = APIRouter(tags=["letters"])


@router.get("/options")
def options_api(user: User = Depends(get_current_user)):
    return JSONResponse(letter_options())


@router.post("/wizard/step")
def wizard_step(body: WizardStepRequest, user: User = Depends(get_current_user)):
    if body.direction == "back":
        result = WizardStep(step=back(min(body.step, TOTAL_STEPS)))
    else:
        result = advance(body.step, body.form)
    return JSONResponse(
        {
            "step": result.step,
            "title": STEP_TITLES[result.step],
            "complete": result.complete,
            "missing": result.missing,
            "total_steps": TOTAL_STEPS,
        }
    )


@router.post("/letters/prompt")
def preview_prompt(
    request: Request,
    body: LetterGenerateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Build the prompt without generating; no credit is used."""
    prompt = prompt_for_request(body.request, body.document_key, body.document_text)
    audit(db, request, "prompt_preview", f"type={body.request.letter_type.value}, len={len(prompt)}", user_id=user.id)
    db.commit()
    return JSONResponse({"prompt": prompt})


@router.post("/letters")
@limiter.limit(settings.rate_limit_generate)
def create_letter(
    request: Request,
    body: LetterGenerateRequest,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
    generator: LetterGenerator = Depends(get_generator),
):
    prompt = prompt_for_request(body.request, body.document_key, body.document_text)
    result = run_generation(request, db, user, generator, {"prompt": prompt}, action="letter")
    return JSONResponse({"id": str(result.letter.id), "text": result.text})


@router.get("/letters")
def letters_api(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return JSONResponse({"letters": [letter_to_dict(letter) for letter in list_letters(db, user.id)]})


@router.get("/letters/{letter_id}")
def letter_api(
    letter_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    letter = get_letter_for_user(db, letter_id, user.id)
    if not letter:
        return JSONResponse({"error": "Letter not found"}, status_code=404)
    return JSONResponse(letter_to_dict(letter))


@router.get("/letters/{letter_id}/download")
def download_letter(
    request: Request,
    letter_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Download a generated letter as a DOCX file."""
    letter = get_letter_for_user(db, letter_id, user.id)
    if not letter:
        return JSONResponse({"error": "Letter not found"}, status_code=404)

    buf, filename = build_docx(letter)
    audit(db, request, "letter_download", f"letter={letter.id}", user_id=user.id, letter_id=letter.id)
    db.commit()

    return Response(
        content=buf.getvalue(),
        media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        headers={
            "Content-Disposition": f"attachment; filename=\"{filename}\"; filename*=UTF-8''{quote(filename)}",
        },
    )


@router.post("/documents/extract")
def extract_document(
    file: UploadFile = File(...),
    user: User = Depends(get_current_user),
):
    """Read a supporting document locally and return its text for the prompt."""
    data = file.file.read(settings.max_upload_bytes + 1)
    try:
        text = extract_text(file.filename or "", file.content_type or "", data)
    except DocumentError as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    return JSONResponse({"filename": file.filename, "text": text})
