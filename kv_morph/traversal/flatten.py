"""Flattening of nested mappings into a single level."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kv_morph.result import Err, Ok, capture

from .kinds import ValueKind, classify, require_mapping


if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator, Mapping


_DONE = object()


def flatten(mapping: Mapping[Any, Any]) -> dict[Hashable, Any]:
    """Hoist every nested key/value pair to the top level.

    Keys that pointed at nested mappings are discarded. Whenever two pairs
    share a key, the one reached first is kept.
    """
    mapping = require_mapping(mapping)
    flat: dict[Hashable, Any] = {}
    stack: list[Iterator[tuple[Any, Any]]] = [iter(mapping.items())]
    while stack:
        entry = next(stack[-1], _DONE)
        if entry is _DONE:
            _ = stack.pop()
            continue
        key, value = entry
        if classify(value) is ValueKind.MAPPING:
            stack.append(iter(value.items()))
        elif key not in flat:
            flat[key] = value
    return flat


def try_flatten(mapping: Mapping[Any, Any]) -> Ok[dict[Hashable, Any]] | Err:
    return capture(flatten, mapping)
