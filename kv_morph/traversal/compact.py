"""Removal of null and empty-mapping entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, assert_never

from kv_morph.result import Err, Ok, capture

from .kinds import ValueKind, classify, is_empty_mapping, require_mapping


if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator, Mapping


_DONE = object()


def _droppable(value: object) -> bool:
    return value is None or is_empty_mapping(value)


def compact(mapping: Mapping[Any, Any]) -> dict[Hashable, Any]:
    """Drop entries whose value is None or an empty (non-record) mapping.

    Nested mappings are not examined.
    """
    mapping = require_mapping(mapping)
    return {key: value for key, value in mapping.items() if not _droppable(value)}


def _reclean(compacted: dict[Hashable, Any]) -> None:
    emptied = [key for key, value in compacted.items() if _droppable(value)]
    for key in emptied:
        del compacted[key]


def compact_deep(mapping: Mapping[Any, Any]) -> dict[Hashable, Any]:
    """Compact ``mapping`` and every mapping nested beneath it.

    A nested mapping that only becomes empty once its own children are
    compacted is removed from its parent as well.
    """
    mapping = require_mapping(mapping)
    root: dict[Hashable, Any] = {}
    # (entries still to visit, mapping being filled); a mapping is re-cleaned
    # once its frame is exhausted, after all of its children were.
    stack: list[tuple[Iterator[tuple[Any, Any]], dict[Hashable, Any]]] = [(iter(mapping.items()), root)]
    while stack:
        entries, compacted = stack[-1]
        entry = next(entries, _DONE)
        if entry is _DONE:
            _ = stack.pop()
            _reclean(compacted)
            continue

        key, value = entry
        kind = classify(value)
        match kind:
            case ValueKind.MAPPING:
                if len(value) == 0:
                    continue
                child: dict[Hashable, Any] = {}
                compacted[key] = child
                stack.append((iter(value.items()), child))
            case ValueKind.SCALAR:
                if value is None:
                    continue
                compacted[key] = value
            case ValueKind.OPAQUE | ValueKind.SEQUENCE:
                compacted[key] = value
            case _:
                assert_never(kind)
    return root


def try_compact(mapping: Mapping[Any, Any]) -> Ok[dict[Hashable, Any]] | Err:
    return capture(compact, mapping)


def try_compact_deep(mapping: Mapping[Any, Any]) -> Ok[dict[Hashable, Any]] | Err:
    return capture(compact_deep, mapping)
