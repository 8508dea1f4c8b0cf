"""Tests for the credit-gated generation workflow."""

import pytest

from src.auth.models import User
from src.generation.errors import (
    ConfigurationError,
    InvalidInput,
    PaymentRequired,
    Unauthorized,
    UpstreamError,
)
from src.generation.service import CallerContext, LetterGenerator
from src.letters.models import GeneratedLetter

PROMPT = {"prompt": "Write a academic recommendation letter in English."}


def _credits(db_session, user):
    db_session.expire_all()
    return db_session.get(User, user.id).credits


class TestGate:
    def test_success_debits_one_credit_and_stores_letter(self, db_session, completion_client):
        user = User(email="three@example.com", password_hash="x", credits=3)
        db_session.add(user)
        db_session.commit()

        result = LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session, user=user))
        db_session.commit()

        assert result.text == "Dear Committee, ..."
        assert _credits(db_session, user) == 2
        letters = db_session.query(GeneratedLetter).filter(GeneratedLetter.user_id == user.id).all()
        assert len(letters) == 1
        assert letters[0].content == "Dear Committee, ..."
        assert letters[0].model_used == "claude-haiku-4-5-20251001"
        assert letters[0].tokens_output == 480
        completion_client.complete.assert_called_once_with(PROMPT["prompt"])

    def test_past_due_without_credits_is_refused(self, db_session, broke_user, completion_client):
        broke_user.subscription_status = "past_due"
        db_session.commit()

        with pytest.raises(PaymentRequired) as exc_info:
            LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session, user=broke_user))

        assert exc_info.value.status_code == 402
        assert _credits(db_session, broke_user) == 0
        completion_client.complete.assert_not_called()
        assert db_session.query(GeneratedLetter).count() == 0

    def test_subscriber_without_credits_generates(self, db_session, subscriber, completion_client):
        LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session, user=subscriber))
        db_session.commit()

        assert _credits(db_session, subscriber) == 0
        assert db_session.query(GeneratedLetter).count() == 1

    def test_subscriber_with_credits_is_still_debited(self, db_session, test_user, completion_client):
        test_user.subscription_status = "active"
        db_session.commit()

        LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session, user=test_user))
        assert _credits(db_session, test_user) == 1

    def test_anonymous_caller(self, db_session, completion_client):
        with pytest.raises(Unauthorized):
            LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session))
        completion_client.complete.assert_not_called()

    def test_inactive_user(self, db_session, test_user, completion_client):
        test_user.is_active = False
        with pytest.raises(Unauthorized):
            LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session, user=test_user))

    @pytest.mark.parametrize("payload", [{}, {"prompt": ""}, {"prompt": "   \n"}, {"prompt": 42}])
    def test_invalid_prompt(self, db_session, test_user, completion_client, payload):
        with pytest.raises(InvalidInput):
            LetterGenerator(completion_client).generate(payload, CallerContext(db=db_session, user=test_user))
        assert _credits(db_session, test_user) == 2
        completion_client.complete.assert_not_called()

    def test_unauthorized_checked_before_input(self, db_session, completion_client):
        with pytest.raises(Unauthorized):
            LetterGenerator(completion_client).generate({}, CallerContext(db=db_session))

    def test_missing_configuration(self, db_session, test_user):
        generator = LetterGenerator(ConfigurationError())
        assert not generator.configured

        with pytest.raises(ConfigurationError) as exc_info:
            generator.generate(PROMPT, CallerContext(db=db_session, user=test_user))

        assert exc_info.value.status_code == 500
        assert _credits(db_session, test_user) == 2

    def test_configuration_checked_before_entitlement(self, db_session, broke_user):
        with pytest.raises(ConfigurationError):
            LetterGenerator(ConfigurationError()).generate(PROMPT, CallerContext(db=db_session, user=broke_user))

    def test_upstream_failure_keeps_debit(self, db_session, test_user, completion_client):
        completion_client.complete.side_effect = UpstreamError()

        with pytest.raises(UpstreamError) as exc_info:
            LetterGenerator(completion_client).generate(PROMPT, CallerContext(db=db_session, user=test_user))
        db_session.rollback()

        assert exc_info.value.detail == "Something went wrong"
        assert _credits(db_session, test_user) == 1
        assert db_session.query(GeneratedLetter).count() == 0
