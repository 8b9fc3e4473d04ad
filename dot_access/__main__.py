"""Interface for ``python -m dot_access``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence

from . import __version__
from .exceptions import KeyNotFoundError
from .mappings import DotNotation


__all__ = ["main"]


def _load(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _dump(value: Any) -> None:
    print(json.dumps(value, indent=2, ensure_ascii=False))


def _assignments(items: Sequence[str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for item in items:
        path, sep, raw = item.partition("=")
        if not sep:
            msg = f"expected PATH=VALUE, got: {item}"
            raise ValueError(msg)
        values[path] = _decode(raw)
    return values


def build_parser() -> ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = ArgumentParser(prog="dot_access", description="Read and edit JSON documents with dotted paths.")
    _ = parser.add_argument("-v", "--version", action="version", version=__version__)
    _ = parser.add_argument("--verbose", action="store_true", help="log path operations to stderr")
    _ = parser.add_argument("--sep", default=".", help="path separator (default: %(default)s)")
    commands = parser.add_subparsers(dest="command", required=True)

    get_cmd = commands.add_parser("get", help="print the value(s) at one or more paths")
    _ = get_cmd.add_argument("file", help="JSON document, or - for stdin")
    _ = get_cmd.add_argument("paths", nargs="+")
    _ = get_cmd.add_argument("--default", type=_decode, help="JSON value returned for missing paths")

    set_cmd = commands.add_parser("set", help="print the document with PATH=VALUE items applied")
    _ = set_cmd.add_argument("file", help="JSON document, or - for stdin")
    _ = set_cmd.add_argument("items", nargs="+", metavar="PATH=VALUE")

    delete_cmd = commands.add_parser("delete", help="print the document with paths removed")
    _ = delete_cmd.add_argument("file", help="JSON document, or - for stdin")
    _ = delete_cmd.add_argument("paths", nargs="+")
    _ = delete_cmd.add_argument("--strict", action="store_true", help="fail when a path is missing")

    has_cmd = commands.add_parser("has", help="check that paths exist")
    _ = has_cmd.add_argument("file", help="JSON document, or - for stdin")
    _ = has_cmd.add_argument("paths", nargs="+")
    _ = has_cmd.add_argument("--any", action="store_true", help="succeed when any path exists")

    return parser


def main(args: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    parser = build_parser()
    options = parser.parse_args(args)
    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        document = DotNotation(_load(options.file), sep=options.sep)
        if options.command == "get":
            _dump(document.get(options.paths, options.default))
        elif options.command == "set":
            _dump(document.set(_assignments(options.items)).data)
        elif options.command == "delete":
            _dump(document.delete(options.paths, throw=options.strict).data)
        else:
            found = document.has_one(options.paths) if options.any else document.has(options.paths)
            _dump(found)
            return 0 if found else 1
    except KeyNotFoundError as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")
    except (OSError, ValueError) as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
