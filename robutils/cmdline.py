"""Simple lookups in a command-line argument list."""

from __future__ import annotations

from collections.abc import Iterable


def cli_option_exist(args: Iterable[str], option: str) -> bool:
    """Return whether ``option`` appears among ``args``."""
    return option in list(args)


def cli_get_option(args: Iterable[str], option: str) -> str | None:
    """Return the argument following ``option``, or None if there is none."""
    items = list(args)
    try:
        position = items.index(option)
    except ValueError:
        return None
    following = items[position + 1:position + 2]
    return following[0] if following else None