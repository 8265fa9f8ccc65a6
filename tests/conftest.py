"""Shared test fixtures for the skeleton test suite."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from skeleton.app import create_app
from skeleton.config import Settings
from skeleton.services.mailer import Address, Mailer, MailMessage
from skeleton.services.results import DeliveryResult, ProbeResult

FIXED_NOW = datetime(2026, 10, 19, 8, 20, 0, 123456, tzinfo=timezone.utc)


class RecordingMailer(Mailer):
    """Mailer that records messages instead of talking SMTP."""

    def __init__(self, error: str | None = None) -> None:
        super().__init__(
            host="localhost",
            port=1025,
            default_sender=Address(address="hello@example.com", name="Skeleton"),
        )
        self.error = error
        self.sent: list[MailMessage] = []

    def send(self, message: MailMessage) -> DeliveryResult:
        self.sent.append(message)
        if self.error is not None:
            return DeliveryResult(ok=False, error=self.error)
        return DeliveryResult.success()


class StaticProbe:
    """Database probe with a fixed outcome."""

    def __init__(self, error: str | None = None) -> None:
        self.error = error
        self.calls = 0

    def get_connection(self) -> ProbeResult:
        self.calls += 1
        if self.error is not None:
            return ProbeResult(ok=False, error=self.error)
        return ProbeResult.success()

    def dispose(self) -> None:
        pass


def _test_settings(tmp_path) -> Settings:
    """Return settings suitable for testing."""
    storage = tmp_path / "storage"
    storage.mkdir()
    return Settings(
        environment="testing",
        debug=True,
        log_format="console",
        rate_limit_default="1000/minute",
        allowed_origins="http://localhost:3000,http://localhost:5015",
        database_url=f"sqlite:///{tmp_path / 'database.sqlite'}",
        storage_path=str(storage),
    )


@pytest.fixture
def settings(tmp_path):
    """Test settings."""
    return _test_settings(tmp_path)


@pytest.fixture
def mailer():
    """Mailer that succeeds and records every message."""
    return RecordingMailer()


@pytest.fixture
def app(settings, mailer):
    """Create a fresh FastAPI app for testing."""
    return create_app(settings, mailer=mailer, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(app):
    """HTTP test client."""
    return TestClient(app)
