"""Shared test fixtures."""

import uuid
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.audit.models import AuditLog
from src.auth.models import SubscriptionStatus, User
from src.database import Base
from src.integrations.anthropic_client import CompletionResult
from src.letters.models import GeneratedLetter
from src.letters.schemas import LetterRequest
from src.prompting.random_source import SeededRandom

# Models must be imported so Base.metadata.create_all() sees all tables.
_ALL_MODELS = [User, GeneratedLetter, AuditLog]


@pytest.fixture
def db_session():
    """Create an in-memory SQLite database for testing.

    Note: SQLite doesn't support all PostgreSQL features (UUID),
    but works for basic service logic testing.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSession = sessionmaker(bind=engine)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_user(db_session):
    """Create a test user with two credits and no subscription."""
    user = User(
        id=uuid.uuid4(),
        email="test@example.com",
        password_hash="$2b$12$fakehash",
        credits=2,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def broke_user(db_session):
    """User with no credits and no subscription."""
    user = User(
        id=uuid.uuid4(),
        email="broke@example.com",
        password_hash="$2b$12$fakehash",
        credits=0,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def subscriber(db_session):
    """User with no credits but an active subscription."""
    user = User(
        id=uuid.uuid4(),
        email="subscriber@example.com",
        password_hash="$2b$12$fakehash",
        credits=0,
        subscription_status=SubscriptionStatus.ACTIVE.value,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def test_letter(db_session, test_user):
    """Create a stored letter for the test user."""
    letter = GeneratedLetter(
        id=uuid.uuid4(),
        user_id=test_user.id,
        content="Dear Committee,\n\nI recommend Ana without reservation.\n\nSincerely,\nJane Doe",
        model_used="claude-haiku-4-5-20251001",
        tokens_input=800,
        tokens_output=400,
        cost_usd=0.00224,
    )
    db_session.add(letter)
    db_session.commit()
    return letter


@pytest.fixture
def rng():
    """Seeded random source: same seed, same prompt."""
    return SeededRandom(42)


@pytest.fixture
def letter_request():
    """A complete academic request with every optional prompt section turned off."""
    return LetterRequest(
        letter_type="academic",
        rec_first_name="Jane",
        rec_last_name="Doe",
        rec_title="Professor",
        rec_org="MIT",
        relationship="professor",
        known_time="btw1y2y",
        applicant_first_name="Ana",
        applicant_last_name="Lopez",
        applicant_position="PhD in Physics",
    )


@pytest.fixture
def completion_client():
    """Completion client stub returning a fixed letter."""
    client = MagicMock()
    client.complete.return_value = CompletionResult(
        text="Dear Committee, ...",
        model_id="claude-haiku-4-5-20251001",
        tokens_input=120,
        tokens_output=480,
        cost_usd=0.002016,
    )
    return client


@pytest.fixture
def anthropic_message():
    """Factory for fake Messages API responses with numeric usage."""

    def _make(text="Dear Committee, ...", input_tokens=100, output_tokens=300):
        return SimpleNamespace(
            content=[SimpleNamespace(type="text", text=text)],
            usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
        )

    return _make
