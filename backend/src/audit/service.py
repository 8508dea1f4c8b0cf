"""Audit log service."""

import contextlib
from uuid import UUID

from fastapi import Request
from sqlalchemy.orm import Session

from ..rate_limit import client_ip
from .models import AuditLog

MAX_DETAIL_LENGTH = 2000


def audit(
    db: Session,
    request: Request,
    action: str,
    detail: str = "",
    user_id: UUID | None = None,
    letter_id: UUID | None = None,
) -> None:
    """Write an audit log entry. Falls back to the session user when no id is given."""
    if user_id is None:
        uid = request.session.get("user_id") if "session" in request.scope else None
        if uid:
            with contextlib.suppress(ValueError, AttributeError):
                user_id = UUID(uid)

    db.add(
        AuditLog(
            user_id=user_id,
            letter_id=letter_id,
            action=action,
            detail=detail[:MAX_DETAIL_LENGTH],
            ip_address=client_ip(request)[:45],
        )
    )
