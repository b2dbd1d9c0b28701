"""Helpers for masking personal data before it reaches the logs."""

from __future__ import annotations


def mask_email(value: str | None) -> str | None:
    if not value or "@" not in value:
        return value
    local, _, domain = value.partition("@")
    if not local:
        return "***@" + domain
    return f"{local[0]}***@{domain}"


def mask_token(value: str | None, visible: int = 6) -> str | None:
    """Keep a short prefix of an opaque token so log lines can be correlated."""
    if not value:
        return value
    return value[:visible] + "..."


__all__ = ["mask_email", "mask_token"]
