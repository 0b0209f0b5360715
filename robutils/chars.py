"""Character classification that ignores the locale."""

from __future__ import annotations


def isalnum_no_locale(c: str) -> bool:
    """Return whether ``c`` is an ASCII digit or letter."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return "0" <= c <= "9" or "A" <= c <= "Z" or "a" <= c <= "z"