"""Utilities: thread-local error state, a string map, byte and item containers, and path, environment, search and formatting helpers."""

__version__ = "0.1.0"