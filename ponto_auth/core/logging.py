"""Process-wide logging configuration."""

from __future__ import annotations

import logging

from asgi_correlation_id import CorrelationIdFilter

from ponto_auth.security.logging_filters import SensitiveFilter, install_sensitive_filter

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | [%(correlation_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once: console output tagged with the request id."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # uvicorn --reload and test sessions call this more than once
    if not any(getattr(h, "_ponto_auth", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler._ponto_auth = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        handler.addFilter(CorrelationIdFilter(uuid_length=32, default_value="-"))
        # logger filters do not see records propagated from child loggers
        handler.addFilter(SensitiveFilter())
        root.addHandler(handler)

    install_sensitive_filter("", "uvicorn", "uvicorn.access", "uvicorn.error")
