"""Return codes and the exceptions that stand for them."""

from __future__ import annotations

from enum import IntEnum


class ReturnCode(IntEnum):
    """Numeric result codes used throughout the library."""

    OK = 0
    WARN = 1
    ERROR = 2
    BAD_ALLOC = 10
    INVALID_ARGUMENT = 11
    NOT_ENOUGH_SPACE = 12
    NOT_INITIALIZED = 13
    NOT_FOUND = 14
    STRING_MAP_ALREADY_INIT = 30
    STRING_MAP_INVALID = 31
    STRING_KEY_NOT_FOUND = 32
    LOGGING_SEVERITY_MAP_INVALID = 40
    LOGGING_SEVERITY_STRING_INVALID = 41
    HASH_MAP_NO_MORE_ENTRIES = 50


class RobutilsError(Exception):
    """Base class of every error raised by the package."""

    default_code: ReturnCode = ReturnCode.ERROR

    def __init__(self, message: str = "", code: ReturnCode | int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = ReturnCode(code) if code is not None else self.default_code

    def __str__(self) -> str:
        return self.message


class BadAllocError(RobutilsError, MemoryError):
    """Storage could not be obtained."""

    default_code = ReturnCode.BAD_ALLOC


class InvalidArgumentError(RobutilsError, ValueError):
    """An argument was missing or out of range."""

    default_code = ReturnCode.INVALID_ARGUMENT


class NotEnoughSpaceError(RobutilsError):
    """The container has no room left for the operation."""

    default_code = ReturnCode.NOT_ENOUGH_SPACE


class NotInitializedError(RobutilsError):
    """The resource has not been initialized."""

    default_code = ReturnCode.NOT_INITIALIZED


class NotFoundError(RobutilsError, LookupError):
    """The requested resource was not found."""

    default_code = ReturnCode.NOT_FOUND


class StringMapAlreadyInitError(RobutilsError):
    """The string map was already initialized."""

    default_code = ReturnCode.STRING_MAP_ALREADY_INIT


class StringMapInvalidError(RobutilsError):
    """The string map is not in a usable state."""

    default_code = ReturnCode.STRING_MAP_INVALID


class StringKeyNotFoundError(RobutilsError, KeyError):
    """The key is not present in the string map."""

    default_code = ReturnCode.STRING_KEY_NOT_FOUND


_EXCEPTIONS: dict[ReturnCode, type[RobutilsError]] = {
    ReturnCode.BAD_ALLOC: BadAllocError,
    ReturnCode.INVALID_ARGUMENT: InvalidArgumentError,
    ReturnCode.NOT_ENOUGH_SPACE: NotEnoughSpaceError,
    ReturnCode.NOT_INITIALIZED: NotInitializedError,
    ReturnCode.NOT_FOUND: NotFoundError,
    ReturnCode.STRING_MAP_ALREADY_INIT: StringMapAlreadyInitError,
    ReturnCode.STRING_MAP_INVALID: StringMapInvalidError,
    ReturnCode.STRING_KEY_NOT_FOUND: StringKeyNotFoundError,
}


def error_for_code(code: ReturnCode | int, message: str = "") -> RobutilsError:
    """Return the exception that stands for a failing return code.

    Raises ValueError for ``OK`` and for numbers that are not return codes.
    """
    return_code = ReturnCode(code)
    if return_code is ReturnCode.OK:
        raise ValueError("OK is not an error code")
    exception_type = _EXCEPTIONS.get(return_code, RobutilsError)
    return exception_type(message, return_code)