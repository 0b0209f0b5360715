"""Access to environment variables and the home directory."""

from __future__ import annotations

import os

from robutils.errors import InvalidArgumentError


def get_env(name: str) -> str:
    """Return the value of environment variable ``name``, or ``""`` if unset."""
    if name is None:
        raise InvalidArgumentError("argument env_name is null")
    if not isinstance(name, str):
        raise InvalidArgumentError("env_name must be a string")
    return os.environ.get(name, "")


def get_home_dir() -> str | None:
    """Return HOME if set and non-empty, else USERPROFILE likewise, else None."""
    for variable in ("HOME", "USERPROFILE"):
        value = get_env(variable)
        if value:
            return value
    return None