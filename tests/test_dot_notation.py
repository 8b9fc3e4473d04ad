from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dot_access.exceptions import KeyNotFoundError
from dot_access.mappings import DotNotation
from dot_access.paths.parser import is_index


_SEGMENTS = st.text(min_size=1, max_size=8).filter(lambda value: "." not in value)
_PATHS = st.lists(_SEGMENTS, min_size=1, max_size=4).map(".".join)
_NAME_PATHS = st.lists(_SEGMENTS.filter(lambda value: not is_index(value)), min_size=1, max_size=4).map(".".join)
_JSON_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=30)
_JSON_VALUES = st.recursive(
    _JSON_SCALARS,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(_SEGMENTS, children, max_size=4),
    max_leaves=15,
)


@pytest.fixture
def profile() -> DotNotation:
    return DotNotation({"user": {"profile": {"id": 625, "pic": "625.png"}}})


def test_get_single_value(profile: DotNotation) -> None:
    assert profile.get("user.profile.id") == 625


def test_get_without_keys_returns_whole_container(profile: DotNotation) -> None:
    assert profile.get() is profile.data
    assert profile.get([]) is profile.data


def test_get_multiple_values() -> None:
    settings = DotNotation({"app": {"name": "My App", "version": "1.0"}, "user": {"theme": "light"}})
    assert settings.get(["app.name", "app.version", "user"]) == {
        "name": "My App",
        "version": "1.0",
        "user": {"theme": "light"},
    }


def test_get_with_default() -> None:
    settings = DotNotation({"app": {"name": "My App", "version": "1.0"}, "user": {"theme": "light"}})
    assert settings.get("user.name", "Test User") == "Test User"
    assert settings.get("user.theme", "test") == "light"
    assert settings.get(["app.env", "app.name"], ["local", "ignored"]) == {"env": "local", "name": "My App"}


def test_get_missing_without_default_raises(profile: DotNotation) -> None:
    with pytest.raises(KeyNotFoundError, match="key 'name' not found in path 'user.profile'"):
        _ = profile.get("user.profile.name")


def test_set_returns_self_for_chaining(profile: DotNotation) -> None:
    result = profile.set({"user.profile.id": 12345}).set({"user.active": True})
    assert result is profile
    assert profile.get("user.profile.id") == 12345
    assert profile.get("user.active") is True


def test_set_hook_fires_once_for_repeated_value(profile: DotNotation) -> None:
    calls: list[tuple[Any, str]] = []
    _ = profile.set({"user.name": "Ann"}, lambda value, path: calls.append((value, path)))
    _ = profile.set({"user.name": "Ann"}, lambda value, path: calls.append((value, path)))
    assert calls == [("Ann", "user.name")]


def test_set_replaces_scalar_root() -> None:
    document = DotNotation("not a container")
    _ = document.set({"a.b": 1})
    assert document.data == {"a": {"b": 1}}


def test_delete_single_and_multiple(profile: DotNotation) -> None:
    deleted: list[tuple[str, Any]] = []
    _ = profile.delete("user.profile.pic", after_delete=lambda path, old: deleted.append((path, old)))
    assert deleted == [("user.profile.pic", "625.png")]
    assert not profile.has("user.profile.pic")

    _ = profile.delete(["user.profile.id", "user.profile.missing"])
    assert profile.data == {"user": {"profile": {}}}


def test_delete_with_throw(profile: DotNotation) -> None:
    with pytest.raises(KeyNotFoundError, match="user.profile.name"):
        _ = profile.delete("user.profile.name", throw=True)


def test_has_and_has_one(profile: DotNotation) -> None:
    assert profile.has("user.profile.id")
    assert not profile.has("user.profile.name")
    assert profile.has(["user.profile.id", "user.profile.pic"])
    assert not profile.has(["user.profile.id", "user.profile.name"])
    assert not profile.has([])

    assert profile.has_one(["user.profile.name", "user.profile.pic"])
    assert not profile.has_one(["user.profile.name", "user.profile.uuid"])


def test_mapping_protocol_uses_paths(profile: DotNotation) -> None:
    assert profile["user.profile.id"] == 625
    assert "user.profile.pic" in profile
    assert "user.profile.name" not in profile
    assert 3 not in profile

    profile["user.profile.id"] = 1
    assert profile.data["user"]["profile"]["id"] == 1

    del profile["user.profile.pic"]
    assert "user.profile.pic" not in profile

    with pytest.raises(KeyError):
        _ = profile["user.missing"]
    with pytest.raises(KeyError):
        del profile["user.missing"]


def test_mapping_mixins_follow_paths(profile: DotNotation) -> None:
    profile.update({"user.profile.name": "Ann", "meta.version": 2})
    assert profile.data["meta"] == {"version": 2}
    assert profile.pop("user.profile.name") == "Ann"
    assert profile.pop("user.profile.name", "gone") == "gone"
    assert profile.setdefault("user.profile.id", 0) == 625


def test_iteration_and_len_cover_top_level_keys() -> None:
    document = DotNotation({"a": {"b": 1}, "c": 2})
    assert list(document) == ["a", "c"]
    assert len(document) == 2

    sequence = DotNotation([{"name": "John"}, {"name": "Alice"}])
    assert list(sequence) == ["0", "1"]
    assert sequence["1.name"] == "Alice"

    assert len(DotNotation(5)) == 0


def test_copy_is_detached(profile: DotNotation) -> None:
    snapshot = profile.copy()
    profile["user.profile.id"] = 1
    assert snapshot == {"user": {"profile": {"id": 625, "pic": "625.png"}}}


def test_repr_and_str_are_dict_like() -> None:
    document = DotNotation({"user": {"alice": {"age": 30}}})
    expected = "{'user': {'alice': {'age': 30}}}"
    assert repr(document) == expected
    assert str(document) == expected


def test_top_level_keys_containing_separator_stay_addressable() -> None:
    document = DotNotation({"example.com": 1, "c": 2})
    assert dict(document.items()) == {"example.com": 1, "c": 2}
    assert list(document.values()) == [1, 2]
    assert document == {"example.com": 1, "c": 2}
    assert "example.com" in document

    document["example.com"] = 3
    assert document.data == {"example.com": 3, "c": 2}

    document.clear()
    assert document.data == {}
    assert len(document) == 0


def test_set_keeps_earlier_writes_when_hook_fails() -> None:
    def stop_at_b(_value: Any, path: str) -> None:
        if path == "b":
            msg = "refusing b"
            raise RuntimeError(msg)

    document = DotNotation([1, 2])
    with pytest.raises(RuntimeError, match="refusing b"):
        _ = document.set({"a": 1, "b": 2}, stop_at_b)
    assert document.data == {"0": 1, "1": 2, "a": 1}


def test_tuple_root_iterates_indexes() -> None:
    document = DotNotation((10, 20))
    assert len(document) == 2
    assert list(document) == ["0", "1"]
    assert "0" in document
    assert document["1"] == 20


def test_custom_separator() -> None:
    document = DotNotation({"hosts": {"example.com": {"port": 443}}}, sep="/")
    assert document.get("hosts/example.com/port") == 443
    assert document.get(["hosts/example.com/port", "hosts/example.com"]) == {
        "port": 443,
        "example.com": {"port": 443},
    }

    with pytest.raises(ValueError, match="sep must not be empty"):
        _ = DotNotation({}, sep="")


@given(container=st.dictionaries(_SEGMENTS, _JSON_VALUES, max_size=4), path=_PATHS, value=_JSON_VALUES)
def test_set_then_get_round_trips(container: dict[str, Any], path: str, value: Any) -> None:
    document = DotNotation(container)
    _ = document.set({path: value})
    assert document.get(path) == value
    assert document.has(path)


@given(container=_JSON_VALUES.filter(lambda value: value is not None))
def test_empty_path_is_identity(container: Any) -> None:
    document = DotNotation(container)
    assert document.get("") is container


@given(container=st.dictionaries(_SEGMENTS, _JSON_VALUES, max_size=4), path=_PATHS)
def test_exists_agrees_with_get(container: dict[str, Any], path: str) -> None:
    document = DotNotation(container)
    try:
        _ = document.get(path)
    except KeyNotFoundError:
        assert not document.has(path)
    else:
        assert document.has(path)


@given(container=st.dictionaries(_SEGMENTS, _JSON_VALUES, max_size=4), path=_NAME_PATHS)
def test_delete_removes_path(container: dict[str, Any], path: str) -> None:
    document = DotNotation(container)
    _ = document.set({path: "value"}).delete(path)
    assert not document.has(path)
    with pytest.raises(KeyNotFoundError):
        _ = document.delete(path, throw=True)
