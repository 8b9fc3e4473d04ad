"""Path parsing and single-path operations."""

from .engine import Resolution, delete_path, get_path, path_exists, resolve, set_path
from .parser import PathParser, join_path, parse_path


__all__ = [
    "PathParser",
    "Resolution",
    "delete_path",
    "get_path",
    "join_path",
    "parse_path",
    "path_exists",
    "resolve",
    "set_path",
]
