"""dot-access - dotted path access to nested dicts and lists"""

import importlib.metadata

from .batch import delete_multi, exists_all, exists_any, get_multi, set_multi
from .exceptions import KeyNotFoundError
from .mappings import DotNotation
from .paths import PathParser, delete_path, get_path, parse_path, path_exists, resolve, set_path


try:
    __version__ = importlib.metadata.version("dot-access")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "DotNotation",
    "KeyNotFoundError",
    "PathParser",
    "__version__",
    "delete_multi",
    "delete_path",
    "exists_all",
    "exists_any",
    "get_multi",
    "get_path",
    "parse_path",
    "path_exists",
    "resolve",
    "set_multi",
    "set_path",
]
