"""Logging filters that scrub sensitive content."""

from __future__ import annotations

import logging
import re

_SENSITIVE_PATTERN = re.compile(
    r"(Authorization: Bearer\s+[\w\.-]+"
    r"|\"(?:access_token|token)\"\s*:\s*\"[^\"]+\""
    r"|\"(?:password|newPassword)\"\s*:\s*\"[^\"]+\""
    r"|token=[0-9a-f]{16,})",
    re.IGNORECASE,
)


def scrub(text: str) -> str:
    """Replace credentials and tokens in ``text`` with a redaction marker."""
    return _SENSITIVE_PATTERN.sub("**REDACTED**", text)


class SensitiveFilter(logging.Filter):
    """Replace sensitive tokens in log messages with a redaction marker."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # malformed records are reported by the handler when it formats them
            return True
        cleaned = scrub(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = ()
        return True


def install_sensitive_filter(*logger_names: str) -> None:
    """Attach a single :class:`SensitiveFilter` to each named logger."""
    for name in logger_names:
        target = logging.getLogger(name)
        if not any(isinstance(flt, SensitiveFilter) for flt in target.filters):
            target.addFilter(SensitiveFilter())


__all__ = ["SensitiveFilter", "install_sensitive_filter", "scrub"]
