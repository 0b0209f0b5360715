"""A growable list that stores shallow copies of its items."""

from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import Any

from robutils.errors import InvalidArgumentError


class ArrayList:
    """List of items with a capacity that doubles when full and never shrinks."""

    def __init__(self, initial_capacity: int = 0) -> None:
        if not isinstance(initial_capacity, int) or initial_capacity < 0:
            raise InvalidArgumentError("initial_capacity must be a non-negative integer")
        self._capacity = initial_capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The number of items the list can hold before it grows."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return (copy.copy(item) for item in list(self._items))

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r}, capacity={self._capacity})"

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidArgumentError("index must be an integer")
        if index < 0 or index >= len(self._items):
            raise InvalidArgumentError("index is out of bounds of the list")

    def add(self, data: Any) -> None:
        """Append a shallow copy of ``data`` to the end of the list."""
        if len(self._items) >= self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else 1
        self._items.append(copy.copy(data))

    def set(self, index: int, data: Any) -> None:
        """Replace the item at ``index`` with a shallow copy of ``data``."""
        self._check_index(index)
        self._items[index] = copy.copy(data)

    def remove(self, index: int) -> None:
        """Remove the item at ``index``; the capacity is kept."""
        self._check_index(index)
        del self._items[index]

    def get(self, index: int) -> Any:
        """Return a shallow copy of the item at ``index``."""
        self._check_index(index)
        return copy.copy(self._items[index])