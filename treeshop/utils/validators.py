"""Deterministic validators and sanitizers for inbound lead data."""

from __future__ import annotations


def sanitize_text(value: str | None, max_len: int = 20000) -> str:
    """Sanitize free-form content before scoring/display."""
    if value is None:
        return ""
    cleaned = str(value).replace("\x00", "").strip()
    cleaned = cleaned[:max_len]
    return cleaned


def is_present(value: str | None) -> bool:
    """True when a text field carries something other than whitespace."""
    return bool(sanitize_text(value))
