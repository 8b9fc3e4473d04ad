"""Single-path get/set/delete/exists over nested containers.

Reads never create structure, writes always do, deletes never do.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, NamedTuple

from dot_access.exceptions import KeyNotFoundError

from .parser import DEFAULT_SEP, PathParser, is_index


logger = logging.getLogger(__name__)

DefaultHook = Callable[[Any, str, str], None]
ResolveHook = Callable[[Any, str], None]
SetHook = Callable[[Any, str], None]
DeleteHook = Callable[[str, Any], None]

_MISSING: Any = object()


class Resolution(NamedTuple):
    """Outcome of walking a path without raising."""

    found: bool
    value: Any = None
    segment: str | None = None
    keys_path: str = ""


def is_sequence(node: Any) -> bool:
    """Return True for ordered sequences that are not strings."""
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def _is_writable(node: Any) -> bool:
    if isinstance(node, (str, bytes, bytearray)):
        return False
    return isinstance(node, (MutableMapping, MutableSequence))


def _find_slot(node: Any, segment: str) -> Any:
    """Return the key or index under which ``segment`` is stored, or _MISSING."""
    if isinstance(node, Mapping):
        if segment in node:
            return segment
        if is_index(segment) and int(segment) in node:
            return int(segment)
        return _MISSING
    if is_sequence(node) and is_index(segment):
        index = int(segment)
        if 0 <= index < len(node):
            return index
    return _MISSING


def _lookup(node: Any, segment: str) -> Any:
    slot = _find_slot(node, segment)
    if slot is _MISSING:
        return _MISSING
    return node[slot]


def _new_slot(node: Any, segment: str) -> tuple[Any, Any]:
    """Make room for a missing ``segment`` in a writable node.

    Sequences grow by one at their end; any other segment turns the sequence
    into a mapping keyed by the string form of each index.
    """
    if isinstance(node, MutableMapping):
        return node, segment
    if is_index(segment) and int(segment) == len(node):
        return node, len(node)
    logger.debug("converting sequence to mapping to hold key %r", segment)
    converted = {str(position): item for position, item in enumerate(node)}
    return converted, segment


def _store(node: Any, slot: Any, value: Any) -> None:
    if isinstance(node, MutableSequence) and slot == len(node):
        node.append(value)
    else:
        node[slot] = value


def _same(existing: Any, value: Any) -> bool:
    if existing is _MISSING:
        return False
    return type(existing) is type(value) and existing == value


def resolve(container: Any, path: str | int, *, sep: str = DEFAULT_SEP) -> Resolution:
    """Walk ``path`` through ``container`` and report what was found."""
    parser = PathParser(sep)
    node = container
    walked: list[str] = []
    for segment in parser.parse(path):
        child = _lookup(node, segment)
        if child is _MISSING:
            return Resolution(found=False, segment=segment, keys_path=parser.join(walked))
        node = child
        walked.append(segment)
    return Resolution(found=True, value=node)


def get_path(
    container: Any,
    path: str | int = "",
    default: Any = None,
    *,
    on_default: DefaultHook | None = None,
    on_resolve: ResolveHook | None = None,
    sep: str = DEFAULT_SEP,
) -> Any:
    """Return the value stored at ``path``.

    The empty path returns ``container`` itself. A missing segment returns
    ``default`` when it is not None (after calling ``on_default`` with the
    default, the path and the missing segment) and raises
    :class:`KeyNotFoundError` otherwise. ``on_resolve`` sees every value that
    was actually found.
    """
    if path == "":
        return container

    resolution = resolve(container, path, sep=sep)
    if not resolution.found:
        if default is not None:
            logger.debug("key %r missing in %r; using default", resolution.segment, path)
            if on_default is not None:
                on_default(default, str(path), resolution.segment)
            return default
        raise KeyNotFoundError(resolution.segment, resolution.keys_path)

    if on_resolve is not None:
        on_resolve(resolution.value, str(path))
    return resolution.value


def _assign(node: Any, segments: list[str], value: Any, path: str, before_set: SetHook | None) -> Any:
    """Return ``node`` with ``value`` written below it at ``segments``."""
    if not segments:
        if _same(node, value):
            logger.debug("value at %r unchanged", path)
            return node
        if before_set is not None:
            before_set(value, path)
        return value

    if not _is_writable(node):
        if node is not _MISSING:
            logger.debug("replacing %s with a mapping while setting %r", type(node).__name__, path)
        node = {}

    segment, rest = segments[0], segments[1:]
    slot = _find_slot(node, segment)
    if slot is _MISSING:
        current = _MISSING
        node, slot = _new_slot(node, segment)
    else:
        current = node[slot]

    child = _assign(current, rest, value, path, before_set)
    if child is not current:
        _store(node, slot, child)
    return node


def set_path(
    container: Any,
    path: str | int,
    value: Any,
    *,
    before_set: SetHook | None = None,
    sep: str = DEFAULT_SEP,
) -> Any:
    """Write ``value`` at ``path`` and return the updated container.

    Missing or non-container nodes along the way are replaced with empty
    mappings. Containers are updated in place, but the root itself is
    replaced when it cannot hold the path, so always use the return value.
    ``before_set`` is called only when the stored value actually changes.
    """
    segments = PathParser(sep).parse(path)
    return _assign(container, segments, value, str(path), before_set)


def delete_path(
    container: Any,
    path: str | int,
    throw: bool = False,
    *,
    after_delete: DeleteHook | None = None,
    sep: str = DEFAULT_SEP,
) -> Any:
    """Remove the entry at ``path`` from ``container`` in place.

    A missing entry is ignored unless ``throw`` is set, in which case a
    :class:`KeyNotFoundError` naming the full path is raised.
    """
    segments = PathParser(sep).parse(path)

    parent = container if segments else _MISSING
    for segment in segments[:-1]:
        parent = _lookup(parent, segment)
        if parent is _MISSING:
            break

    slot = _MISSING
    if parent is not _MISSING and _is_writable(parent):
        slot = _find_slot(parent, segments[-1])

    if slot is _MISSING:
        if throw:
            raise KeyNotFoundError(str(path))
        logger.debug("nothing to delete at %r", path)
        return container

    removed = parent.pop(slot)
    if after_delete is not None:
        after_delete(str(path), removed)
    return container


def path_exists(container: Any, path: str | int, *, sep: str = DEFAULT_SEP) -> bool:
    """Return True when ``path`` resolves without needing a default."""
    return resolve(container, path, sep=sep).found
