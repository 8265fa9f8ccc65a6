"""Tests for the mail diagnostic endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from skeleton.app import create_app
from tests.conftest import RecordingMailer


# ─── /test-mail ──────────────────────────────────────────────────────────────

class TestSingleRecipientMail:
    """Tests for GET /test-mail."""

    def test_success(self, client, mailer):
        response = client.get("/test-mail")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert "Mailhog" in data["message"]
        assert "http://localhost:8025" in data["message"]

    def test_message_addressed_to_single_recipient(self, client, mailer):
        client.get("/test-mail")
        assert len(mailer.sent) == 1
        message = mailer.sent[0]
        assert message.to == ["test@example.com"]
        assert message.cc == []
        assert message.bcc == []
        assert message.sender is None
        assert message.subject == "Test Email from Skeleton"
        assert "Mailhog" in message.body

    def test_failure_still_returns_200(self, settings):
        failing = RecordingMailer(error="[Errno 111] Connection refused")
        client = TestClient(create_app(settings, mailer=failing))

        response = client.get("/test-mail")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["message"] == "Failed to send email: [Errno 111] Connection refused"


# ─── /test-mail-multiple ─────────────────────────────────────────────────────

class TestMultipleRecipientMail:
    """Tests for GET /test-mail-multiple."""

    def test_success(self, client):
        response = client.get("/test-mail-multiple")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["message"].startswith("Multi-recipient email sent successfully!")
        assert "Mailhog" in data["message"]

    def test_recipients_and_sender(self, client, mailer):
        client.get("/test-mail-multiple")
        assert len(mailer.sent) == 1
        message = mailer.sent[0]
        assert message.to == ["user1@example.com", "user2@example.com"]
        assert message.cc == ["cc@example.com"]
        assert message.bcc == ["bcc@example.com"]
        assert message.sender.address == "noreply@skeleton.test"
        assert message.sender.name == "Skeleton App"
        assert message.subject == "Multiple Recipients Test from Skeleton"

    def test_failure_still_returns_200(self, settings):
        failing = RecordingMailer(error="SMTP timeout")
        client = TestClient(create_app(settings, mailer=failing))

        response = client.get("/test-mail-multiple")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["message"] == "Failed to send multi-recipient email: SMTP timeout"


# ─── Malformed messages ──────────────────────────────────────────────────────

class TestMalformedMail:
    """Header errors are reported in the body like transport failures."""

    def test_newline_in_app_name_is_reported(self, settings):
        settings.app_name = "Bad\nName"
        client = TestClient(create_app(settings))

        response = client.get("/test-mail")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["message"].startswith("Failed to send email: ")

    def test_multiple_with_newline_in_app_name_is_reported(self, settings):
        settings.app_name = "Bad\nName"
        client = TestClient(create_app(settings))

        response = client.get("/test-mail-multiple")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["message"].startswith("Failed to send multi-recipient email: ")
