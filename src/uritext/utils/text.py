"""Blank detection and locale-independent case folding."""

from __future__ import annotations

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def is_blank(value: object) -> bool:
    """True for None, an empty string, or a whitespace-only string."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only; every other code point is left untouched."""
    return text.translate(_ASCII_LOWER)
