"""Tests for credit and subscription entitlement."""

import pytest

from src.auth.models import SubscriptionStatus
from src.credits.service import (
    account_summary,
    can_generate,
    debit_credit,
    grant_credits,
    has_valid_subscription,
    set_subscription_status,
)


class TestHasValidSubscription:
    @pytest.mark.parametrize("status", ["active", "cancel_at_period_end", SubscriptionStatus.ACTIVE])
    def test_valid(self, status):
        assert has_valid_subscription(status)

    @pytest.mark.parametrize("status", [None, "", "deleted", "past_due", SubscriptionStatus.PAST_DUE])
    def test_invalid(self, status):
        assert not has_valid_subscription(status)


class TestCanGenerate:
    def test_with_credits(self, test_user):
        assert can_generate(test_user)

    def test_without_credits_or_subscription(self, broke_user):
        assert not can_generate(broke_user)

    def test_subscription_without_credits(self, subscriber):
        assert can_generate(subscriber)

    def test_past_due_without_credits(self, db_session, broke_user):
        set_subscription_status(db_session, broke_user, SubscriptionStatus.PAST_DUE)
        assert not can_generate(broke_user)


class TestDebitCredit:
    def test_takes_one_credit(self, db_session, test_user):
        assert debit_credit(db_session, test_user)
        db_session.commit()
        assert test_user.credits == 1

    def test_never_goes_negative(self, db_session, broke_user):
        assert not debit_credit(db_session, broke_user)
        db_session.commit()
        assert broke_user.credits == 0

    def test_drains_to_zero(self, db_session, test_user):
        assert debit_credit(db_session, test_user)
        assert debit_credit(db_session, test_user)
        assert not debit_credit(db_session, test_user)
        assert test_user.credits == 0


class TestGrantCredits:
    def test_adds_to_balance(self, db_session, test_user):
        assert grant_credits(db_session, test_user, 10) == 12

    def test_rejects_non_positive(self, db_session, test_user):
        with pytest.raises(ValueError):
            grant_credits(db_session, test_user, 0)


class TestSetSubscriptionStatus:
    def test_sets_and_clears(self, db_session, test_user):
        set_subscription_status(db_session, test_user, "active")
        assert test_user.subscription_status == "active"
        set_subscription_status(db_session, test_user, None)
        assert test_user.subscription_status is None

    def test_rejects_unknown_status(self, db_session, test_user):
        with pytest.raises(ValueError):
            set_subscription_status(db_session, test_user, "trialing")


class TestAccountSummary:
    def test_summary(self, subscriber):
        summary = account_summary(subscriber)
        assert summary == {
            "email": "subscriber@example.com",
            "credits": 0,
            "subscription_status": "active",
            "has_valid_subscription": True,
            "can_generate": True,
        }
