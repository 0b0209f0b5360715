"""A byte buffer with an explicit capacity and a used length."""

from __future__ import annotations

from robutils.errors import InvalidArgumentError, NotEnoughSpaceError


class Uint8Array:
    """Bytes stored in a buffer of fixed capacity.

    The length is the number of bytes in use and never exceeds the capacity.
    """

    def __init__(self, capacity: int = 0) -> None:
        if not isinstance(capacity, int) or capacity < 0:
            raise InvalidArgumentError("capacity must be a non-negative integer")
        self._buffer = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        """The number of bytes the buffer can hold."""
        return len(self._buffer)

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"Uint8Array({self.to_bytes()!r}, capacity={self.capacity})"

    def resize(self, new_size: int) -> None:
        """Change the capacity, truncating the used length if it no longer fits."""
        if not isinstance(new_size, int) or new_size <= 0:
            raise InvalidArgumentError("new size of uint8_array has to be greater than zero")
        current = self.capacity
        if new_size == current:
            return
        if new_size > current:
            self._buffer.extend(bytes(new_size - current))
        else:
            del self._buffer[new_size:]
        self._length = min(self._length, new_size)

    def clear(self) -> None:
        """Release the storage, leaving zero length and zero capacity."""
        self._buffer = bytearray()
        self._length = 0

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data`` after the used bytes.

        Raises NotEnoughSpaceError when the data does not fit in the capacity.
        """
        if data is None:
            raise InvalidArgumentError("data argument is null")
        chunk = bytes(data)
        end = self._length + len(chunk)
        if end > self.capacity:
            raise NotEnoughSpaceError("not enough capacity in uint8 array")
        self._buffer[self._length:end] = chunk
        self._length = end

    def to_bytes(self) -> bytes:
        """Return the bytes in use."""
        return bytes(self._buffer[: self._length])