"""Locate a character within a string."""

from __future__ import annotations

NOT_FOUND = -1


def _search_area(string: str | None, delimiter: str, length: int | None) -> str | None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if length is not None and length < 0:
        raise ValueError("length must not be negative")
    if string is None:
        return None
    return string if length is None else string[:length]


def find(string: str | None, delimiter: str, length: int | None = None) -> int:
    """Return the first index of ``delimiter`` in ``string``, or -1.

    With ``length`` only the first ``length`` characters are searched.
    A missing string gives -1.
    """
    area = _search_area(string, delimiter, length)
    return NOT_FOUND if area is None else area.find(delimiter)


def find_last(string: str | None, delimiter: str, length: int | None = None) -> int:
    """Return the last index of ``delimiter`` in ``string``, or -1.

    With ``length`` only the first ``length`` characters are searched.
    A missing string gives -1.
    """
    area = _search_area(string, delimiter, length)
    return NOT_FOUND if area is None else area.rfind(delimiter)