from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from leavedesk.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Attachment(BaseModel):
    filename: str
    content: bytes
    mime_type: str = "application/pdf"


class OutgoingMail(BaseModel):
    """A rendered message ready for delivery."""

    to: str
    subject: str
    text: str
    html: str | None = None
    attachments: list[Attachment] = []


@runtime_checkable
class Mailer(Protocol):
    """Interface for outbound e-mail."""

    async def send(self, mail: OutgoingMail) -> None:
        """Deliver a message. Raises on transport failure."""
        ...


class SmtpMailer:
    """Deliver through an SMTP relay configured in settings.

    ``smtplib`` is blocking, so each send runs in a worker thread.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def _build_message(self, mail: OutgoingMail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._settings.mail_from
        message["To"] = mail.to
        message["Subject"] = mail.subject
        message.set_content(mail.text)
        if mail.html is not None:
            message.add_alternative(mail.html, subtype="html")
        for attachment in mail.attachments:
            maintype, subtype = attachment.mime_type.split("/", 1)
            message.add_attachment(
                attachment.content, maintype=maintype, subtype=subtype, filename=attachment.filename
            )
        return message

    def _deliver(self, message: EmailMessage) -> None:
        settings = self._settings
        smtp_cls = smtplib.SMTP_SSL if settings.smtp_use_ssl else smtplib.SMTP
        with smtp_cls(settings.smtp_host, settings.smtp_port, timeout=30) as client:
            if settings.smtp_username and settings.smtp_password:
                client.login(settings.smtp_username, settings.smtp_password)
            client.send_message(message)

    async def send(self, mail: OutgoingMail) -> None:
        await asyncio.to_thread(self._deliver, self._build_message(mail))
        logger.info("Sent mail %r to %s", mail.subject, mail.to)


class InMemoryMailer:
    """Records messages instead of sending them."""

    def __init__(self) -> None:
        self.outbox: list[OutgoingMail] = []

    async def send(self, mail: OutgoingMail) -> None:
        self.outbox.append(mail)


_mailer: Mailer | None = None


def get_mailer() -> Mailer:
    """Return the configured mailer, defaulting to SMTP."""
    global _mailer
    if _mailer is None:
        _mailer = SmtpMailer(get_settings())
    return _mailer


def set_mailer(mailer: Mailer | None) -> None:
    """Override the mailer (for testing or production wiring)."""
    global _mailer
    _mailer = mailer


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


def password_reset_mail(email: str, reset_link: str, ttl_minutes: int) -> OutgoingMail:
    text = (
        "Hello,\n\n"
        "You requested a password reset. Open the link below to set a new password:\n"
        f"{reset_link}\n\n"
        f"If you did not request this, ignore this email. The link expires in {ttl_minutes} minutes.\n"
    )
    html = (
        "<h2>Password Reset Request</h2>"
        "<p>You requested a password reset. Follow the link below to set a new password.</p>"
        f'<p><a href="{reset_link}">{reset_link}</a></p>'
        f"<p>If you did not request this, ignore this email. The link expires in {ttl_minutes} minutes.</p>"
    )
    return OutgoingMail(to=email, subject="Reset your password", text=text, html=html)


def leave_approved_mail(email: str, name: str, leave_type: str, document: bytes, filename: str) -> OutgoingMail:
    text = (
        f"Hello {name},\n\n"
        f"Your {leave_type.lower()} leave request has been approved. "
        "The signed approval document is attached; its QR code links to the public verification page.\n"
    )
    return OutgoingMail(
        to=email,
        subject="Your leave request has been approved",
        text=text,
        attachments=[Attachment(filename=filename, content=document)],
    )
