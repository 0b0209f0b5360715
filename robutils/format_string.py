"""Printf-style formatting with a cap on the result length."""

from __future__ import annotations

from typing import Any

from robutils.errors import InvalidArgumentError

DEFAULT_LIMIT = 2048


def format_string_limit(limit: int, fmt: str, *args: Any) -> str:
    """Format ``fmt % args`` and keep at most ``limit - 1`` characters.

    The limit counts the terminating position, as a fixed buffer would.
    """
    if fmt is None:
        raise InvalidArgumentError("format_string argument is null")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidArgumentError("limit must be a positive integer")
    try:
        text = fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise InvalidArgumentError(f"failed to format string: {exc}") from exc
    return text[: limit - 1]


def format_string(fmt: str, *args: Any) -> str:
    """Format with the default limit of 2048."""
    return format_string_limit(DEFAULT_LIMIT, fmt, *args)