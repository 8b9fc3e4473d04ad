"""Minimal example for DotNotation over a decoded JSON payload."""

from dot_access import DotNotation


def main() -> None:
    """Run a basic get/set/delete flow."""
    payload = DotNotation(
        {
            "app": {"name": "My App", "version": "1.0"},
            "users": [{"id": 1, "name": "John"}, {"id": 2, "name": "Alice"}],
        }
    )
    print("name:", payload.get("app.name"))
    print("names:", payload.get(["users.0.name", "users.1.name"]))
    print("with defaults:", payload.get(["app.env", "app.name"], ["local"]))

    payload.set({"app.debug": True, "users.2": {"id": 3, "name": "Emma"}}, lambda value, path: print("set", path))
    print("has debug:", payload.has("app.debug"))

    payload.delete("users.0", after_delete=lambda path, removed: print("deleted", path, removed))
    print(f"{payload=}")


if __name__ == "__main__":
    main()
