"""SMTP transport used to deliver transactional email."""

from __future__ import annotations

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from typing import Protocol
from email.message import EmailMessage

from ponto_auth.core.config import Settings
from ponto_auth.security.redact import mask_email

logger = logging.getLogger(__name__)

__all__ = ["MailDeliveryError", "Mailer", "OutgoingEmail", "SmtpMailer"]


class MailDeliveryError(RuntimeError):
    """Raised when a message could not be handed to the SMTP server."""


@dataclass(frozen=True)
class OutgoingEmail:
    """A rendered message ready for delivery."""

    to: str
    subject: str
    text: str
    html: str | None = None


class Mailer(Protocol):
    """Anything able to deliver an :class:`OutgoingEmail`."""

    async def send(self, email: OutgoingEmail) -> None: ...


class SmtpMailer:
    """Deliver email through one SMTP relay.

    Built once at application startup and shared by every request. Delivery
    runs in a worker thread so a slow relay never blocks the event loop.
    """

    def __init__(self, settings: Settings) -> None:
        self._host = settings.smtp_host
        self._port = settings.smtp_port
        self._username = settings.smtp_username
        self._password = settings.smtp_password
        self._sender = settings.smtp_from or settings.smtp_username
        self._starttls = settings.smtp_starttls
        self._timeout = settings.smtp_timeout
        self._echo = settings.dev_mail_echo

    @property
    def configured(self) -> bool:
        return bool(self._host and self._sender)

    def build_message(self, email: OutgoingEmail) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = email.subject
        message["To"] = email.to
        message["From"] = self._sender or "no-reply@localhost"
        message.set_content(email.text)
        if email.html:
            message.add_alternative(email.html, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        kwargs = {} if self._timeout is None else {"timeout": self._timeout}
        try:
            with smtplib.SMTP(self._host, self._port, **kwargs) as server:
                if self._starttls:
                    server.starttls()
                if self._username and self._password:
                    server.login(self._username, self._password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(str(exc)) from exc

    async def send(self, email: OutgoingEmail) -> None:
        """Deliver ``email``; raise :class:`MailDeliveryError` on failure."""
        if self._echo:
            logger.info(
                "DEV_MAIL_ECHO enabled; not sending %r to %s",
                email.subject,
                mask_email(email.to),
            )
            return
        if not self.configured:
            raise MailDeliveryError("SMTP is not configured")

        message = self.build_message(email)
        await asyncio.to_thread(self._deliver, message)
        logger.info("Email %r sent to %s", email.subject, mask_email(email.to))
