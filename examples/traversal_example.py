"""Minimal example of key conversion and compaction on nested data."""

from kv_morph import SymbolRegistry, compact_deep, convert_keys, convert_keys_deep, try_compact


def main() -> None:
    """Convert keys with each policy, then compact a payload."""
    payload = {"user": {"name": "alice", "email": None, "tags": [{"kind": "admin"}]}, "meta": {}}
    print("unconditional:", convert_keys_deep(payload))

    known = SymbolRegistry(["user"])
    print("safe:", convert_keys(payload, "safe", known=known))
    print("allow-listed:", convert_keys_deep(payload, ["name", "kind"]))

    print("compacted:", compact_deep(payload))
    print("non-raising form:", try_compact(["not", "a", "mapping"]))


if __name__ == "__main__":
    main()
