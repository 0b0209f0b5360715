"""A string-to-string map with an explicit capacity and slot order."""

from __future__ import annotations

from collections.abc import Iterator

from robutils.errors import (
    InvalidArgumentError,
    NotEnoughSpaceError,
    StringKeyNotFoundError,
)


def _check_string(name: str, value: object) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} argument is null")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string")
    return value


class StringMap:
    """Map of string keys to string values held in a fixed number of slots.

    Keys keep the slot they were stored in; removing a key leaves a gap that
    the next new key fills.  Iteration follows slot order.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise InvalidArgumentError("capacity must not be negative")
        self._slots: list[tuple[str, str] | None] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """The number of key value pairs the map can hold without growing."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._index_of(key) is not None

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise StringKeyNotFoundError(f"key '{key}' not found")
        return value

    def __iter__(self) -> Iterator[str]:
        return (slot[0] for slot in self._slots if slot is not None)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._pairs())
        return f"StringMap({{{pairs}}}, capacity={self.capacity})"

    def _pairs(self) -> Iterator[tuple[str, str]]:
        return (slot for slot in self._slots if slot is not None)

    def _index_of(self, key: str) -> int | None:
        for index, slot in enumerate(self._slots):
            if slot is not None and slot[0] == key:
                return index
        return None

    def reserve(self, capacity: int) -> None:
        """Change the capacity, never below the number of stored pairs.

        Shrinking packs the stored pairs to the front, keeping their order.
        """
        if capacity < 0:
            raise InvalidArgumentError("capacity must not be negative")
        capacity = max(capacity, self._size)
        current = self.capacity
        if capacity == current:
            return
        if capacity > current:
            self._slots.extend([None] * (capacity - current))
            return
        if any(slot is not None for slot in self._slots[capacity:]):
            packed: list[tuple[str, str] | None] = list(self._pairs())
            packed.extend([None] * (capacity - len(packed)))
            self._slots = packed
        else:
            del self._slots[capacity:]

    def clear(self) -> None:
        """Remove every pair, keeping the capacity."""
        self._slots = [None] * self.capacity
        self._size = 0

    def set(self, key: str, value: str) -> None:
        """Store a pair, growing the capacity if the map is full."""
        key = _check_string("key", key)
        value = _check_string("value", value)
        if self._index_of(key) is None and self._size >= self.capacity:
            self.reserve(self.capacity * 2 if self.capacity else 1)
        self.set_no_resize(key, value)

    def set_no_resize(self, key: str, value: str) -> None:
        """Store a pair, raising NotEnoughSpaceError if there is no free slot."""
        key = _check_string("key", key)
        value = _check_string("value", value)
        index = self._index_of(key)
        if index is not None:
            self._slots[index] = (key, value)
            return
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = (key, value)
                self._size += 1
                return
        raise NotEnoughSpaceError("string map is full")

    def unset(self, key: str) -> None:
        """Remove a pair, raising StringKeyNotFoundError if the key is absent."""
        key = _check_string("key", key)
        index = self._index_of(key)
        if index is None:
            raise StringKeyNotFoundError(f"key '{key}' not found in string map")
        self._slots[index] = None
        self._size -= 1

    def get(self, key: str | None) -> str | None:
        """Return the value for ``key``, or None if it is absent or not a string."""
        if not isinstance(key, str):
            return None
        index = self._index_of(key)
        if index is None:
            return None
        slot = self._slots[index]
        return None if slot is None else slot[1]

    def get_next_key(self, key: str | None) -> str | None:
        """Return the first key for None, else the key after ``key``.

        None is returned at the end of the map or when ``key`` is absent.
        """
        if key is None:
            start = 0
        else:
            index = self._index_of(key) if isinstance(key, str) else None
            if index is None:
                return None
            start = index + 1
        for slot in self._slots[start:]:
            if slot is not None:
                return slot[0]
        return None

    def copy_into(self, other: StringMap) -> None:
        """Copy every pair into ``other``, overwriting and growing as needed."""
        if other is None:
            raise InvalidArgumentError("dst_string_map argument is null")
        for key, value in list(self._pairs()):
            other.set(key, value)