"""Tests for authentication service."""

from src.auth.models import User
from src.auth.service import (
    authenticate_user,
    create_user,
    ensure_admin_user,
    get_user_by_email,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_hash_and_verify(self):
        password = "test_password_123"
        hashed = hash_password(password)
        assert hashed != password
        assert verify_password(password, hashed)

    def test_wrong_password_fails(self):
        hashed = hash_password("correct_password")
        assert not verify_password("wrong_password", hashed)


class TestGetUserByEmail:
    def test_finds_existing_user(self, db_session, test_user):
        user = get_user_by_email(db_session, "test@example.com")
        assert user is not None
        assert user.id == test_user.id

    def test_returns_none_for_unknown(self, db_session):
        user = get_user_by_email(db_session, "unknown@example.com")
        assert user is None


class TestAuthenticateUser:
    def test_valid_credentials(self, db_session):
        hashed = hash_password("mypassword")
        user = User(email="auth@test.com", password_hash=hashed)
        db_session.add(user)
        db_session.commit()

        result = authenticate_user(db_session, "auth@test.com", "mypassword")
        assert result is not None
        assert result.email == "auth@test.com"

    def test_wrong_password(self, db_session):
        hashed = hash_password("mypassword")
        user = User(email="auth2@test.com", password_hash=hashed)
        db_session.add(user)
        db_session.commit()

        result = authenticate_user(db_session, "auth2@test.com", "wrongpassword")
        assert result is None

    def test_inactive_user_rejected(self, db_session):
        user = User(email="off@test.com", password_hash=hash_password("pw"), is_active=False)
        db_session.add(user)
        db_session.commit()

        assert authenticate_user(db_session, "off@test.com", "pw") is None

    def test_nonexistent_user(self, db_session):
        result = authenticate_user(db_session, "nobody@test.com", "password")
        assert result is None


class TestCreateUser:
    def test_new_user_gets_default_credits(self, db_session):
        from src.config import settings

        user = create_user(db_session, "new@test.com", "secret")
        db_session.commit()
        assert user.credits == settings.default_credits
        assert user.subscription_status is None
        assert verify_password("secret", user.password_hash)

    def test_explicit_credits(self, db_session):
        user = create_user(db_session, "rich@test.com", "secret", credits=25)
        assert user.credits == 25

    def test_negative_credits_clamped(self, db_session):
        user = create_user(db_session, "neg@test.com", "secret", credits=-4)
        assert user.credits == 0


class TestEnsureAdminUser:
    def test_creates_admin_once(self, db_session, monkeypatch):
        from src.config import settings

        monkeypatch.setattr(settings, "admin_email", "admin@test.com")
        monkeypatch.setattr(settings, "admin_password", "adminpw")

        ensure_admin_user(db_session)
        ensure_admin_user(db_session)
        db_session.commit()

        assert db_session.query(User).filter(User.email == "admin@test.com").count() == 1

    def test_skipped_without_env(self, db_session, monkeypatch):
        from src.config import settings

        monkeypatch.setattr(settings, "admin_email", "")
        ensure_admin_user(db_session)
        assert db_session.query(User).count() == 0
