"""Authentication routes."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..audit.service import audit
from ..database import get_db
from .service import authenticate_user

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(
    request: Request,
    email: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    user = authenticate_user(db, email, password)
    if not user:
        audit(db, request, "login_failed", f"email={email}")
        db.commit()
        return JSONResponse({"error": "Invalid credentials"}, status_code=401)
    request.session["user_id"] = str(user.id)
    audit(db, request, "login", f"email={email}", user_id=user.id)
    db.commit()
    return JSONResponse({"ok": True, "user": {"id": str(user.id), "email": user.email}})


@router.post("/logout")
def logout(request: Request, db: Session = Depends(get_db)):
    audit(db, request, "logout")
    db.commit()
    request.session.clear()
    return JSONResponse({"ok": True})
