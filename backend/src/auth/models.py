"""User model: authentication plus the credit account used by the generation gate."""

import enum
import uuid
from datetime import UTC, datetime

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from ..config import settings
from ..database import Base


class SubscriptionStatus(str, enum.Enum):
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCEL_AT_PERIOD_END = "cancel_at_period_end"
    DELETED = "deleted"


class User(Base):
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True)
    credits = Column(Integer, nullable=False, default=lambda: settings.default_credits)
    # Written by the billing collaborator; None means the user never subscribed
    subscription_status = Column(String(30), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
    )

    letters = relationship("GeneratedLetter", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (CheckConstraint("credits >= 0", name="ck_users_credits_non_negative"),)
