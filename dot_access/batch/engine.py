"""Multi-path operations built on the single-path engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from dot_access.paths.engine import delete_path, get_path, is_sequence, path_exists, set_path
from dot_access.paths.parser import DEFAULT_SEP, PathParser, is_index


if TYPE_CHECKING:
    from collections.abc import Iterator

    from dot_access.paths.engine import DefaultHook, DeleteHook, ResolveHook, SetHook


logger = logging.getLogger(__name__)


def _is_group(entry: Any) -> bool:
    return isinstance(entry, Mapping) or is_sequence(entry)


def _as_group(keys: Any) -> Any:
    if isinstance(keys, (str, int)):
        return [keys]
    return keys


def _entries(group: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(explicit_key, entry)`` pairs; positional entries have no key."""
    if isinstance(group, Mapping):
        for key, entry in group.items():
            yield (None if is_index(key) else key), entry
    else:
        for entry in group:
            yield None, entry


def _paths(keys: Any) -> Iterator[Any]:
    """Yield every path of a group, flattening nested groups in order."""
    keys = _as_group(keys)
    entries = keys.values() if isinstance(keys, Mapping) else keys
    for entry in entries:
        if _is_group(entry):
            yield from _paths(entry)
        else:
            yield entry


def default_for(default: Any, position: int) -> Any:
    """Return the default that applies to the entry at ``position``."""
    if isinstance(default, (list, tuple)):
        return default[position] if position < len(default) else None
    return default


def _unique_key(key: Any, position: int, taken: Mapping[Any, Any]) -> Any:
    if key not in taken:
        return key
    suffix = position
    candidate = f"{key}_{suffix}"
    while candidate in taken:
        suffix += 1
        candidate = f"{key}_{suffix}"
    logger.debug("result key %r already used; storing as %r", key, candidate)
    return candidate


def get_multi(
    container: Any,
    group: Any = (),
    default: Any = None,
    *,
    on_default: DefaultHook | None = None,
    on_resolve: ResolveHook | None = None,
    sep: str = DEFAULT_SEP,
) -> Any:
    """Resolve a path group against ``container``.

    ``group`` is a path, a sequence of groups, or a mapping of output key to
    group. Output keys come from the mapping when given, otherwise from the
    last path segment, falling back to the entry position when that segment
    is an index. A list or tuple ``default`` is handed out by position. A
    group of exactly one entry returns that entry's value directly.
    """
    group = _as_group(group)
    if not group:
        return container

    parser = PathParser(sep)
    result: dict[Any, Any] = {}
    for position, (explicit, entry) in enumerate(_entries(group)):
        entry_default = default_for(default, position)
        if _is_group(entry):
            key = position if explicit is None else explicit
            value = get_multi(
                container, entry, entry_default, on_default=on_default, on_resolve=on_resolve, sep=sep
            )
        else:
            key = explicit
            if key is None:
                last = parser.last(entry)
                key = position if last is None or is_index(last) else last
            value = get_path(
                container, entry, entry_default, on_default=on_default, on_resolve=on_resolve, sep=sep
            )
        result[_unique_key(key, position, result)] = value

    if len(result) == 1:
        return next(iter(result.values()))
    return result


def set_multi(
    container: Any,
    values: Mapping[Any, Any],
    *,
    before_set: SetHook | None = None,
    sep: str = DEFAULT_SEP,
) -> Any:
    """Write each ``path: value`` item in order and return the container."""
    for path, value in values.items():
        container = set_path(container, path, value, before_set=before_set, sep=sep)
    return container


def delete_multi(
    container: Any,
    paths: Any,
    throw: bool = False,
    *,
    after_delete: DeleteHook | None = None,
    sep: str = DEFAULT_SEP,
) -> Any:
    """Delete each path in order; with ``throw`` the first miss stops the batch."""
    for path in _paths(paths):
        container = delete_path(container, path, throw, after_delete=after_delete, sep=sep)
    return container


def exists_all(container: Any, paths: Any, *, sep: str = DEFAULT_SEP) -> bool:
    """Return True when every path exists."""
    return all(path_exists(container, path, sep=sep) for path in _paths(paths))


def exists_any(container: Any, paths: Any, *, sep: str = DEFAULT_SEP) -> bool:
    """Return True when at least one path exists."""
    return any(path_exists(container, path, sep=sep) for path in _paths(paths))
