"""Shared FastAPI dependencies."""

from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .auth.models import User
from .config import settings
from .database import get_db
from .generation.service import LetterGenerator


class AuthRequired(Exception):
    """Raised when user is not authenticated. Handled by exception handler in main.py."""

    pass


class AdminRequired(Exception):
    """Raised when a non-admin user calls an admin route."""


def get_generator(request: Request) -> LetterGenerator:
    """Get the letter generator built at startup from app state."""
    return request.app.state.generator


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> User | None:
    """The session user, or None when nobody is logged in."""
    user_id_str = request.session.get("user_id")
    if not user_id_str:
        return None
    try:
        user_id = UUID(user_id_str)
    except (ValueError, AttributeError):
        request.session.clear()
        return None
    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.is_active:
        request.session.clear()
        return None
    return user


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """Get the authenticated user from session, or reject the request."""
    if user is None:
        raise AuthRequired()
    return user


def get_admin_user(user: User = Depends(get_current_user)) -> User:
    """The logged-in user, provided it is the configured admin account."""
    if not settings.admin_email or user.email != settings.admin_email:
        raise AdminRequired()
    return user
