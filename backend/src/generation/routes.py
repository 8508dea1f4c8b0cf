"""Generation route: the single entry point into the credit-gated completion call."""

import logging

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..audit.service import audit
from ..auth.models import User
from ..config import settings
from ..database import get_db
from ..dependencies import get_generator, get_optional_user
from ..rate_limit import limiter
from .errors import GenerationError
from .service import CallerContext, GenerationResult, LetterGenerator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])


def run_generation(
    request: Request,
    db: Session,
    user: User | None,
    generator: LetterGenerator,
    payload: dict,
    action: str = "generate",
) -> GenerationResult:
    """Run the gate, audit the outcome, and commit. Generation errors are re-raised for the app handler."""
    try:
        result = generator.generate(payload, CallerContext(db=db, user=user))
        audit(
            db,
            request,
            action,
            f"letter={result.letter.id}, len={len(result.text)}",
            user_id=user.id,
            letter_id=result.letter.id,
        )
        db.commit()
    except GenerationError as exc:
        db.rollback()
        if exc.status_code >= 500 and user is not None:
            audit(db, request, f"{action}_error", str(exc.__cause__ or exc), user_id=user.id)
            db.commit()
        raise
    return result


@router.post("/generate")
@limiter.limit(settings.rate_limit_generate)
def generate_route(
    request: Request,
    payload: dict = Body(...),
    db: Session = Depends(get_db),
    user: User | None = Depends(get_optional_user),
    generator: LetterGenerator = Depends(get_generator),
):
    result = run_generation(request, db, user, generator, payload)
    return JSONResponse({"text": result.text})
