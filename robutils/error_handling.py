"""Per-thread error state holding a message with the place it was set."""

from __future__ import annotations

import inspect
import sys
import threading
from dataclasses import dataclass

LINE_NUMBER_STR_MAX_LENGTH = 20
FORMATTING_CHARACTERS = 6
MESSAGE_MAX_LENGTH = 1024
STATE_MESSAGE_MAX_LENGTH = 768
STATE_FILE_MAX_LENGTH = (
    MESSAGE_MAX_LENGTH
    - STATE_MESSAGE_MAX_LENGTH
    - LINE_NUMBER_STR_MAX_LENGTH
    - FORMATTING_CHARACTERS
    - 1
)

ERROR_NOT_SET = "error not set"

_local = threading.local()


@dataclass(frozen=True)
class ErrorState:
    """An error message and the file and line where it was set."""

    message: str
    file: str
    line_number: int

    def __str__(self) -> str:
        text = f"{self.message}, at {self.file}:{self.line_number}"
        return text[: MESSAGE_MAX_LENGTH - 1]


def set_error_state(message: str | None, file: str | None, line_number: int) -> None:
    """Store the error for the current thread.

    The message and file are truncated to the fixed storage limits.  When the
    message or file is missing, a complaint goes to stderr and the state is
    left unchanged.
    """
    if message is None:
        sys.stderr.write("[error_handling] error message is null, error state not set\n")
        return
    if file is None:
        sys.stderr.write("[error_handling] file is null, error state not set\n")
        return
    _local.state = ErrorState(
        message=str(message)[: STATE_MESSAGE_MAX_LENGTH - 1],
        file=str(file)[: STATE_FILE_MAX_LENGTH - 1],
        line_number=int(line_number),
    )


def set_error_msg(message: str | None) -> None:
    """Set the error message, recording the caller's file and line."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            set_error_state(message, "<unknown>", 0)
        else:
            set_error_state(message, caller.f_code.co_filename, caller.f_lineno)
    finally:
        del frame, caller


def error_is_set() -> bool:
    """Return whether an error is set in the current thread."""
    return getattr(_local, "state", None) is not None


def get_error_state() -> ErrorState | None:
    """Return the current thread's error state, or None if unset."""
    return getattr(_local, "state", None)


def get_error_string() -> str:
    """Return ``message, at file:line`` or ``error not set``."""
    state = get_error_state()
    return ERROR_NOT_SET if state is None else str(state)


def reset_error() -> None:
    """Clear the current thread's error state."""
    _local.state = None