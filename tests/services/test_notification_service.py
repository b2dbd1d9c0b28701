"""Reset link, email content and SMTP transport tests."""

from __future__ import annotations

import smtplib

import pytest

from ponto_auth.core.config import get_settings
from ponto_auth.services import notification_service
from ponto_auth.services.email_service import (
    MailDeliveryError,
    OutgoingEmail,
    SmtpMailer,
)


class FakeSMTP:
    instances: list["FakeSMTP"] = []
    fail_on_send = False

    def __init__(self, host, port, **kwargs):
        self.host = host
        self.port = port
        self.kwargs = kwargs
        self.started_tls = False
        self.logged_in: tuple[str, str] | None = None
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def starttls(self):
        self.started_tls = True

    def login(self, username, password):
        self.logged_in = (username, password)

    def send_message(self, message):
        if FakeSMTP.fail_on_send:
            raise smtplib.SMTPRecipientsRefused({})
        self.messages.append(message)


@pytest.fixture()
def fake_smtp(monkeypatch: pytest.MonkeyPatch) -> type[FakeSMTP]:
    FakeSMTP.instances = []
    FakeSMTP.fail_on_send = False
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def _mailer(**overrides) -> SmtpMailer:
    settings = get_settings().model_copy(update=overrides)
    return SmtpMailer(settings)


def _email() -> OutgoingEmail:
    return notification_service.build_password_reset_email(
        to="a@x.com",
        reset_url="https://reset.example.com/reset.html?token=ab&email=a@x.com",
        ttl_minutes=15,
    )


def test_reset_url_layout() -> None:
    url = notification_service.build_reset_url(
        frontend_url="https://front.example.com/",
        page="reset.html",
        token="abc123",
        email="a@x.com",
    )
    assert url == "https://front.example.com/reset.html?token=abc123&email=a@x.com"


def test_reset_url_encodes_reserved_characters() -> None:
    url = notification_service.build_reset_url(
        frontend_url="https://front.example.com",
        page="/reset.html",
        token="abc",
        email="a+b@x.com",
    )
    assert url.endswith("?token=abc&email=a%2Bb@x.com")


def test_password_reset_email_content() -> None:
    email = _email()

    assert email.subject == "Redefinição de Senha"
    assert email.to == "a@x.com"
    assert "token=ab&email=a@x.com" in email.text
    assert email.html is not None
    assert 'href="https://reset.example.com/reset.html?token=ab&amp;email=a@x.com"' in email.html
    assert "15 minutos" in email.html


@pytest.mark.asyncio
async def test_echo_mode_skips_delivery(fake_smtp: type[FakeSMTP]) -> None:
    mailer = _mailer(dev_mail_echo=True, smtp_host=None)

    await mailer.send(_email())

    assert fake_smtp.instances == []


@pytest.mark.asyncio
async def test_unconfigured_mailer_fails(fake_smtp: type[FakeSMTP]) -> None:
    mailer = _mailer(smtp_host=None, smtp_username=None, smtp_from=None)

    assert not mailer.configured
    with pytest.raises(MailDeliveryError):
        await mailer.send(_email())


@pytest.mark.asyncio
async def test_delivery_through_relay(fake_smtp: type[FakeSMTP]) -> None:
    mailer = _mailer(
        smtp_host="smtp.example.com",
        smtp_port=2525,
        smtp_username="mailer@example.com",
        smtp_password="app-password",
        smtp_from=None,
        smtp_timeout=5.0,
        dev_mail_echo=False,
    )

    await mailer.send(_email())

    [server] = fake_smtp.instances
    assert (server.host, server.port) == ("smtp.example.com", 2525)
    assert server.kwargs == {"timeout": 5.0}
    assert server.started_tls
    assert server.logged_in == ("mailer@example.com", "app-password")
    [message] = server.messages
    assert message["From"] == "mailer@example.com"
    assert message["To"] == "a@x.com"
    assert message.is_multipart()


@pytest.mark.asyncio
async def test_relay_refusal_raises(fake_smtp: type[FakeSMTP]) -> None:
    fake_smtp.fail_on_send = True
    mailer = _mailer(
        smtp_host="smtp.example.com", smtp_from="no-reply@example.com", dev_mail_echo=False
    )

    with pytest.raises(MailDeliveryError):
        await mailer.send(_email())
