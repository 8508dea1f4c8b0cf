"""Authentication service: user management, password hashing, session handling."""

import bcrypt
from sqlalchemy.orm import Session

from ..config import settings
from .models import User


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Verify credentials and return user, or None if invalid."""
    user = get_user_by_email(db, email)
    if not user or not user.is_active or not verify_password(password, user.password_hash):
        return None
    return user


def create_user(db: Session, email: str, password: str, credits: int | None = None) -> User:
    """Create a user with the default credit allowance unless one is given."""
    user = User(
        email=email,
        password_hash=hash_password(password),
        credits=settings.default_credits if credits is None else max(credits, 0),
    )
    db.add(user)
    db.flush()
    return user


def ensure_admin_user(db: Session) -> None:
    """Create admin user from env vars if it doesn't exist yet."""
    if not settings.admin_email or not settings.admin_password:
        return

    existing = get_user_by_email(db, settings.admin_email)
    if existing:
        return

    create_user(db, settings.admin_email, settings.admin_password)
