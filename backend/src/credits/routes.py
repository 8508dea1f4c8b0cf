"""Account and credit balance routes, plus admin top-ups."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..audit.service import audit
from ..auth.models import User
from ..auth.service import get_user_by_email
from ..database import get_db
from ..dependencies import get_admin_user, get_current_user
from .schemas import CreditGrantRequest, SubscriptionUpdateRequest
from .service import account_summary, grant_credits, set_subscription_status

router = APIRouter(tags=["account"])


@router.get("/account")
def account_api(user: User = Depends(get_current_user)):
    return JSONResponse(account_summary(user))


@router.post("/account/credits")
def grant_credits_api(
    request: Request,
    body: CreditGrantRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_admin_user),
):
    target = get_user_by_email(db, body.email.strip())
    if not target:
        return JSONResponse({"error": "User not found"}, status_code=404)

    grant_credits(db, target, body.amount)
    audit(db, request, "credit_grant", f"user={target.id}, amount={body.amount}", user_id=admin.id)
    db.commit()
    return JSONResponse(account_summary(target))


@router.post("/account/subscription")
def subscription_api(
    request: Request,
    body: SubscriptionUpdateRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(get_admin_user),
):
    target = get_user_by_email(db, body.email.strip())
    if not target:
        return JSONResponse({"error": "User not found"}, status_code=404)

    set_subscription_status(db, target, body.status)
    detail = f"user={target.id}, status={target.subscription_status}"
    audit(db, request, "subscription_update", detail, user_id=admin.id)
    db.commit()
    return JSONResponse(account_summary(target))
