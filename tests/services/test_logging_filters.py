from __future__ import annotations

import io
import logging

from ponto_auth.core.logging import setup_logging
from ponto_auth.security.logging_filters import SensitiveFilter, scrub
from ponto_auth.security.redact import mask_email, mask_token


def _record(msg: str, args=()) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


def test_scrub_hides_credentials() -> None:
    text = '{"email": "a@x.com", "password": "pw1", "newPassword": "pw2"}'

    cleaned = scrub(text)
    assert "pw1" not in cleaned
    assert "pw2" not in cleaned
    assert "a@x.com" in cleaned


def test_filter_scrubs_message_and_args() -> None:
    token = "ab" * 32
    record = _record("reset link %s", (f"https://f/reset.html?token={token}",))

    assert SensitiveFilter().filter(record)
    assert token not in record.getMessage()

    bearer = _record("Authorization: Bearer eyJhbGciOi.abc.def")
    SensitiveFilter().filter(bearer)
    assert "eyJhbGciOi" not in bearer.getMessage()


def test_masking_helpers() -> None:
    assert mask_email("maria@example.com") == "m***@example.com"
    assert mask_email("not-an-email") == "not-an-email"
    assert mask_token("abcdef123456") == "abcdef..."
    assert mask_token(None) is None


def test_child_logger_output_is_scrubbed() -> None:
    setup_logging("INFO")
    [handler] = [
        h for h in logging.getLogger().handlers if getattr(h, "_ponto_auth", False)
    ]
    buffer = io.StringIO()
    previous = handler.setStream(buffer)
    try:
        logging.getLogger("ponto_auth.services.auth_service").info(
            'payload {"password": "hunter2", "token": "%s"}', "ab" * 32
        )
    finally:
        handler.setStream(previous)

    output = buffer.getvalue()
    assert "ponto_auth.services.auth_service" in output
    assert "hunter2" not in output
    assert "ab" * 32 not in output
    assert "**REDACTED**" in output
