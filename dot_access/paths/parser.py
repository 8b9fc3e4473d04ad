"""Dotted path parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable


DEFAULT_SEP = "."


class PathParser:
    """Split and join paths on a fixed separator."""

    def __init__(self, sep: str = DEFAULT_SEP) -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def parse(self, path: str | int) -> list[str]:
        """Return the segments of ``path``; the empty path has none."""
        if isinstance(path, int):
            path = str(path)
        if path == "":
            return []
        return path.split(self.sep)

    def join(self, segments: Iterable[str]) -> str:
        """Build a path from segments."""
        return self.sep.join(segments)

    def last(self, path: str | int) -> str | None:
        """Return the final segment of ``path``, or None for the empty path."""
        segments = self.parse(path)
        return segments[-1] if segments else None


def parse_path(path: str | int, sep: str = DEFAULT_SEP) -> list[str]:
    """Split a dotted path into its segments."""
    return PathParser(sep).parse(path)


def join_path(segments: Iterable[str], sep: str = DEFAULT_SEP) -> str:
    """Join segments back into a dotted path."""
    return PathParser(sep).join(segments)


def is_index(segment: object) -> bool:
    """Return True when ``segment`` reads as an integer literal."""
    if isinstance(segment, bool):
        return False
    if isinstance(segment, int):
        return True
    if not isinstance(segment, str) or not segment:
        return False
    digits = segment[1:] if segment[0] == "-" else segment
    return digits.isdigit() and digits.isascii()
