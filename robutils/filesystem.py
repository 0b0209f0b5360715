"""Queries on paths and helpers for building platform paths."""

from __future__ import annotations

import os
from typing import Union

from robutils.errors import InvalidArgumentError

PathArg = Union[str, "os.PathLike[str]", None]


def get_cwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def is_directory(path: PathArg) -> bool:
    """Return whether ``path`` names a directory; False for None."""
    return path is not None and os.path.isdir(path)


def is_file(path: PathArg) -> bool:
    """Return whether ``path`` names a regular file; False for None."""
    return path is not None and os.path.isfile(path)


def exists(path: PathArg) -> bool:
    """Return whether ``path`` names an existing file or directory; False for None."""
    return path is not None and os.path.exists(path)


def is_readable(path: PathArg) -> bool:
    """Return whether ``path`` exists and the current user may read it."""
    return exists(path) and os.access(path, os.R_OK)


def is_writable(path: PathArg) -> bool:
    """Return whether ``path`` exists and the current user may write it."""
    return exists(path) and os.access(path, os.W_OK)


def is_readable_and_writable(path: PathArg) -> bool:
    """Return whether ``path`` exists and may be both read and written."""
    return exists(path) and os.access(path, os.R_OK | os.W_OK)


def join_path(left: str, right: str) -> str:
    """Join two path parts with the platform separator."""
    if left is None:
        raise InvalidArgumentError("left_hand_path argument is null")
    if right is None:
        raise InvalidArgumentError("right_hand_path argument is null")
    return f"{os.fspath(left)}{os.sep}{os.fspath(right)}"


def to_native_path(path: str) -> str:
    """Return ``path`` with every ``/`` replaced by the platform separator."""
    if path is None:
        raise InvalidArgumentError("path argument is null")
    return os.fspath(path).replace("/", os.sep)