"""MutableMapping facade over an owned nested container."""

from __future__ import annotations

import copy
import sys
from collections.abc import Iterator, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any


if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from dot_access.batch import delete_multi, exists_all, exists_any, get_multi
from dot_access.paths import PathParser, delete_path, get_path, path_exists, set_path
from dot_access.paths.engine import is_sequence


if TYPE_CHECKING:
    from dot_access.paths.engine import DefaultHook, DeleteHook, ResolveHook, SetHook


class DotNotation(MutableMapping[str, Any]):
    """Dict-like access to nested data through dotted paths.

    Item access takes a single path (``obj["user.profile.id"]``); the
    :meth:`get`, :meth:`set`, :meth:`delete`, :meth:`has` and :meth:`has_one`
    methods accept path groups and hooks.
    """

    def __init__(self, data: Any = None, *, sep: str = ".") -> None:
        super().__init__()
        self.sep = PathParser(sep).sep
        self.data: Any = {} if data is None else data

    @override
    def get(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        keys: Any = "",
        default: Any = None,
        on_default: DefaultHook | None = None,
        on_resolve: ResolveHook | None = None,
    ) -> Any:
        """Return the value(s) at ``keys``.

        ``keys`` is a path or a path group; see
        :func:`dot_access.batch.get_multi` for how results are keyed.
        """
        return get_multi(
            self.data, keys, default, on_default=on_default, on_resolve=on_resolve, sep=self.sep
        )

    def set(self, values: Mapping[Any, Any], before_set: SetHook | None = None) -> DotNotation:
        """Write every ``path: value`` item of ``values``.

        Items already written stay in place when a later one fails.
        """
        for path, value in values.items():
            self.data = set_path(self.data, path, value, before_set=before_set, sep=self.sep)
        return self

    def delete(self, keys: Any, throw: bool = False, after_delete: DeleteHook | None = None) -> DotNotation:
        """Delete one or more paths, optionally raising for missing ones."""
        self.data = delete_multi(self.data, keys, throw, after_delete=after_delete, sep=self.sep)
        return self

    def has(self, keys: Any) -> bool:
        """Return True when every path in ``keys`` exists."""
        if isinstance(keys, (str, int)):
            keys = [keys]
        if not keys:
            return False
        return exists_all(self.data, keys, sep=self.sep)

    def has_one(self, keys: Any) -> bool:
        """Return True when any path in ``keys`` exists."""
        return exists_any(self.data, keys, sep=self.sep)

    def _is_literal(self, key: object) -> bool:
        """Return True when ``key`` is stored as-is at the top level."""
        return isinstance(self.data, Mapping) and key in self.data

    @override
    def __getitem__(self, key: str) -> Any:
        if self._is_literal(key):
            return self.data[key]
        return get_path(self.data, key, sep=self.sep)

    @override
    def __setitem__(self, key: str, value: Any) -> None:
        if self._is_literal(key) and isinstance(self.data, MutableMapping):
            self.data[key] = value
            return
        self.data = set_path(self.data, key, value, sep=self.sep)

    @override
    def __delitem__(self, key: str) -> None:
        if self._is_literal(key) and isinstance(self.data, MutableMapping):
            del self.data[key]
            return
        self.data = delete_path(self.data, key, throw=True, sep=self.sep)

    @override
    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, int)):
            return False
        if self._is_literal(key):
            return True
        return path_exists(self.data, key, sep=self.sep)

    @override
    def __iter__(self) -> Iterator[str]:
        """Iterate top-level keys (indexes for a sequence root)."""
        if isinstance(self.data, Mapping):
            return iter(self.data)
        if is_sequence(self.data):
            return iter(str(index) for index in range(len(self.data)))
        return iter(())

    @override
    def __len__(self) -> int:
        """Return count of top-level keys."""
        return len(list(iter(self)))

    def copy(self) -> Any:
        """Return a detached deep copy of the owned container."""
        return copy.deepcopy(self.data)

    @override
    def __repr__(self) -> str:
        return repr(self.data)

    @override
    def __str__(self) -> str:
        return str(self.data)
