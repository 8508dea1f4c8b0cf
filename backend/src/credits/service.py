"""Credit and subscription entitlement for letter generation."""

import logging

from sqlalchemy.orm import Session

from ..auth.models import SubscriptionStatus, User

logger = logging.getLogger(__name__)

# Subscription states that never grant access on their own
_INACTIVE_STATUSES = {SubscriptionStatus.DELETED.value, SubscriptionStatus.PAST_DUE.value}


def has_valid_subscription(status: str | None) -> bool:
    status = getattr(status, "value", status)
    return bool(status) and status not in _INACTIVE_STATUSES


def can_generate(user: User) -> bool:
    """A user may generate with a positive credit balance or a valid subscription."""
    return (user.credits or 0) > 0 or has_valid_subscription(user.subscription_status)


def debit_credit(db: Session, user: User) -> bool:
    """Take one credit with a single conditional UPDATE.

    Returns False when the balance was already zero, including when a
    concurrent request took the last credit first.
    """
    updated = (
        db.query(User)
        .filter(User.id == user.id, User.credits > 0)
        .update({User.credits: User.credits - 1}, synchronize_session=False)
    )
    db.refresh(user)
    logger.debug("Credit debit user=%s updated=%d credits_now=%s", user.id, updated, user.credits)
    return updated == 1


def grant_credits(db: Session, user: User, amount: int) -> int:
    """Add credits (billing top-up or admin grant). Returns the new balance."""
    if amount <= 0:
        raise ValueError("amount must be positive")
    db.query(User).filter(User.id == user.id).update(
        {User.credits: User.credits + amount}, synchronize_session=False
    )
    db.refresh(user)
    return user.credits


def set_subscription_status(db: Session, user: User, status: SubscriptionStatus | str | None) -> None:
    value = getattr(status, "value", status)
    if value is not None:
        SubscriptionStatus(value)
    user.subscription_status = value
    db.flush()


def account_summary(user: User) -> dict:
    return {
        "email": user.email,
        "credits": int(user.credits or 0),
        "subscription_status": user.subscription_status,
        "has_valid_subscription": has_valid_subscription(user.subscription_status),
        "can_generate": can_generate(user),
    }
