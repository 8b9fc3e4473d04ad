"""Errors raised by path lookups."""

from __future__ import annotations


class KeyNotFoundError(KeyError):
    """A path segment could not be found in a nested container.

    ``key`` is the missing segment (or the whole path for deletes) and
    ``keys_path`` the dotted prefix that was walked before the failure.
    """

    def __init__(self, key: str, keys_path: str = "") -> None:
        super().__init__(key)
        self.key = key
        self.keys_path = keys_path

    def __str__(self) -> str:
        if self.keys_path:
            return f"key '{self.key}' not found in path '{self.keys_path}'"
        return f"key '{self.key}' not found"
