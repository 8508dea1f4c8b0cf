"""Tests for audit service."""

from unittest.mock import MagicMock

from src.audit.models import AuditLog
from src.audit.service import audit
from src.rate_limit import client_ip


class TestClientIp:
    def test_extracts_forwarded_ip(self):
        request = MagicMock()
        request.headers = {"X-Forwarded-For": "1.2.3.4, 5.6.7.8"}
        assert client_ip(request) == "1.2.3.4"

    def test_uses_client_host(self):
        request = MagicMock()
        request.headers = {}
        request.client.host = "10.0.0.1"
        assert client_ip(request) == "10.0.0.1"

    def test_unknown_when_no_client(self):
        request = MagicMock()
        request.headers = {}
        request.client = None
        assert client_ip(request) == "unknown"


class TestAudit:
    def test_creates_audit_log(self, db_session, test_user):
        request = MagicMock()
        request.headers = {"X-Forwarded-For": "192.168.1.1"}
        request.scope = {"session": {}}
        request.session = {"user_id": str(test_user.id)}

        audit(db_session, request, "test_action", "some detail")
        db_session.commit()

        logs = db_session.query(AuditLog).all()
        assert len(logs) == 1
        assert logs[0].action == "test_action"
        assert logs[0].detail == "some detail"
        assert logs[0].ip_address == "192.168.1.1"
        assert logs[0].user_id == test_user.id

    def test_creates_log_with_explicit_ids(self, db_session, test_user, test_letter):
        request = MagicMock()
        request.headers = {}
        request.client.host = "127.0.0.1"
        request.scope = {}

        audit(db_session, request, "generate", "len=42", user_id=test_user.id, letter_id=test_letter.id)
        db_session.commit()

        log = db_session.query(AuditLog).one()
        assert log.user_id == test_user.id
        assert log.letter_id == test_letter.id

    def test_creates_log_without_session(self, db_session):
        request = MagicMock()
        request.headers = {}
        request.client.host = "127.0.0.1"
        request.scope = {}

        audit(db_session, request, "anonymous_action")
        db_session.commit()

        logs = db_session.query(AuditLog).all()
        assert len(logs) == 1
        assert logs[0].user_id is None
        assert logs[0].action == "anonymous_action"

    def test_truncates_long_detail(self, db_session):
        request = MagicMock()
        request.headers = {}
        request.client.host = "127.0.0.1"
        request.scope = {}

        audit(db_session, request, "big", "x" * 5000)
        db_session.commit()

        assert len(db_session.query(AuditLog).one().detail) == 2000
