"""Diagnostic endpoints that send test emails through the configured mailer."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skeleton.config import Settings
from skeleton.dependencies import get_app_settings, get_mailer
from skeleton.schemas.mail import MailOutcome
from skeleton.services.mailer import Address, Mailer, MailMessage

router = APIRouter(tags=["mail"])

TEST_RECIPIENT = "test@example.com"
MULTIPLE_TO = ["user1@example.com", "user2@example.com"]
MULTIPLE_CC = ["cc@example.com"]
MULTIPLE_BCC = ["bcc@example.com"]
NOREPLY_ADDRESS = "noreply@skeleton.test"


def _deliver(
    mailer: Mailer,
    message: MailMessage,
    success: str,
    failure_prefix: str,
) -> MailOutcome:
    result = mailer.send(message)
    if result.ok:
        return MailOutcome(status="success", message=success)
    return MailOutcome(status="error", message=f"{failure_prefix}{result.error}")


@router.get("/test-mail", response_model=MailOutcome)
def test_mail(
    settings: Settings = Depends(get_app_settings),
    mailer: Mailer = Depends(get_mailer),
) -> MailOutcome:
    """Send a single test email. Failures are reported in the body, not the status code."""
    message = MailMessage(
        subject=f"Test Email from {settings.app_name}",
        body=f"Hello from {settings.app_name}! This is a test email from Mailhog.",
        to=[TEST_RECIPIENT],
    )
    return _deliver(
        mailer,
        message,
        success=f"Email sent successfully! Check Mailhog at {settings.mail_ui_url}",
        failure_prefix="Failed to send email: ",
    )


@router.get("/test-mail-multiple", response_model=MailOutcome)
def test_mail_multiple(
    settings: Settings = Depends(get_app_settings),
    mailer: Mailer = Depends(get_mailer),
) -> MailOutcome:
    """Send one email to several to, cc and bcc recipients with an explicit sender."""
    message = MailMessage(
        subject=f"Multiple Recipients Test from {settings.app_name}",
        body=f"This is a test email to multiple recipients from {settings.app_name}!",
        to=list(MULTIPLE_TO),
        cc=list(MULTIPLE_CC),
        bcc=list(MULTIPLE_BCC),
        sender=Address(address=NOREPLY_ADDRESS, name=f"{settings.app_name} App"),
    )
    return _deliver(
        mailer,
        message,
        success=(
            "Multi-recipient email sent successfully! "
            f"Check Mailhog at {settings.mail_ui_url}"
        ),
        failure_prefix="Failed to send multi-recipient email: ",
    )
