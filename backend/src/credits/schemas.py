"""Admin request bodies for credit and subscription changes."""

from pydantic import BaseModel, Field

from ..auth.models import SubscriptionStatus


class CreditGrantRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    amount: int = Field(..., gt=0, le=10_000)


class SubscriptionUpdateRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    status: SubscriptionStatus | None = None
