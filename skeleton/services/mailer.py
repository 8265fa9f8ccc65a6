"""Plain-text mail delivery over SMTP."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage
from email.utils import formataddr

import structlog
from pydantic import BaseModel, Field

from skeleton.config import Settings
from skeleton.services.results import DeliveryResult

logger = structlog.get_logger()


class Address(BaseModel):
    """A mailbox with an optional display name."""

    address: str
    name: str | None = None

    def formatted(self) -> str:
        return formataddr((self.name or "", self.address))


class MailMessage(BaseModel):
    """An outgoing plain-text message."""

    subject: str
    body: str
    to: list[str]
    cc: list[str] = Field(default_factory=list)
    bcc: list[str] = Field(default_factory=list)
    sender: Address | None = None

    @property
    def recipients(self) -> list[str]:
        """Every envelope recipient, Bcc included."""
        return [*self.to, *self.cc, *self.bcc]


class Mailer:
    """SMTP client that sends :class:`MailMessage` instances."""

    def __init__(
        self,
        host: str,
        port: int,
        default_sender: Address,
        username: str = "",
        password: str = "",
        use_tls: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.default_sender = default_sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "Mailer":
        return cls(
            host=settings.mail_host,
            port=settings.mail_port,
            default_sender=Address(
                address=settings.mail_from_address,
                name=settings.mail_from_name,
            ),
            username=settings.mail_username,
            password=settings.mail_password,
            use_tls=settings.mail_encryption == "tls",
            timeout=settings.mail_timeout,
        )

    def build(self, message: MailMessage) -> EmailMessage:
        """Render *message* as MIME. Bcc recipients never appear in headers."""
        sender = message.sender or self.default_sender
        email = EmailMessage()
        email["From"] = sender.formatted()
        email["To"] = ", ".join(message.to)
        if message.cc:
            email["Cc"] = ", ".join(message.cc)
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    def send(self, message: MailMessage) -> DeliveryResult:
        """Deliver *message* synchronously.

        Malformed headers (ValueError) and transport errors both come back
        as a failed :class:`DeliveryResult`.
        """
        sender = message.sender or self.default_sender
        try:
            email = self.build(message)
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                if self.use_tls:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(
                    email,
                    from_addr=sender.address,
                    to_addrs=message.recipients,
                )
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            logger.warning(
                "mail_send_failed",
                host=self.host,
                port=self.port,
                subject=message.subject,
                error=str(exc),
            )
            return DeliveryResult.failure(exc)

        logger.info(
            "mail_sent",
            subject=message.subject,
            recipients=len(message.recipients),
        )
        return DeliveryResult.success()
