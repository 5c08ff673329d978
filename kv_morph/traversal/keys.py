"""Shallow and recursive key conversion over nested mappings."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Any, assert_never

from kv_morph.key_mapping import resolve_policy
from kv_morph.result import Err, Ok, capture

from .kinds import ValueKind, classify, require_mapping


if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterator, Mapping

    from kv_morph.key_mapping import KeyPolicy
    from kv_morph.key_mapping.policy import KnownSymbols


logger = logging.getLogger(__name__)


_DONE = object()


def _put_new(acc: dict[Hashable, Any], key: Hashable, value: Any) -> bool:
    # the first entry to produce a key wins
    if key in acc:
        return False
    acc[key] = value
    return True


def _convert_mapping(mapping: Mapping[Any, Any], policy: KeyPolicy) -> dict[Hashable, Any]:
    # Each frame holds the source entries still to visit, the container being
    # filled, and an optional callback run once the container is complete.
    root: dict[Hashable, Any] = {}
    stack: list[tuple[Iterator[Any], dict[Hashable, Any] | list[Any], Callable[[], None] | None]] = [
        (iter(mapping.items()), root, None)
    ]
    while stack:
        entries, target, finish = stack[-1]
        entry = next(entries, _DONE)
        if entry is _DONE:
            _ = stack.pop()
            if finish is not None:
                finish()
            continue

        if isinstance(target, dict):
            key, value = entry
            slot = policy.convert(key)
            if not _put_new(target, slot, None):
                continue
        else:
            value = entry
            slot = len(target)
            target.append(None)

        kind = classify(value)
        match kind:
            case ValueKind.OPAQUE | ValueKind.SCALAR:
                target[slot] = value
            case ValueKind.MAPPING:
                child: dict[Hashable, Any] = {}
                target[slot] = child
                stack.append((iter(value.items()), child, None))
            case ValueKind.SEQUENCE:
                items: list[Any] = []
                target[slot] = items
                rebuild = None if type(value) is list else partial(_rebuild, target, slot, type(value), items)
                stack.append((iter(value), items, rebuild))
            case _:
                assert_never(kind)
    return root


def _rebuild(target: dict[Hashable, Any] | list[Any], slot: Any, container: type, items: list[Any]) -> None:
    target[slot] = container(items)


def convert_keys(mapping: Mapping[Any, Any], mode: object = None, *, known: KnownSymbols | None = None) -> dict[Hashable, Any]:
    """Convert the top-level keys of ``mapping``; nested values are copied as-is.

    ``mode`` selects the policy (see ``resolve_policy``). When two keys convert
    to the same key, the entry enumerated first is kept.
    """
    mapping = require_mapping(mapping)
    policy = resolve_policy(mode, known=known)
    if policy.is_identity:
        logger.debug("%r leaves every key unchanged, skipping traversal", policy)
        return dict(mapping)

    converted: dict[Hashable, Any] = {}
    for key, value in mapping.items():
        _ = _put_new(converted, policy.convert(key), value)
    return converted


def convert_keys_deep(
    mapping: Mapping[Any, Any], mode: object = None, *, known: KnownSymbols | None = None
) -> dict[Hashable, Any]:
    """Convert keys at every nesting level, including mappings inside lists.

    Opaque records are copied without being entered. Collisions are resolved
    independently at each level, keeping the first entry.
    """
    mapping = require_mapping(mapping)
    policy = resolve_policy(mode, known=known)
    if policy.is_identity:
        logger.debug("%r leaves every key unchanged, skipping traversal", policy)
        return dict(mapping)
    return _convert_mapping(mapping, policy)


def try_convert_keys(
    mapping: Mapping[Any, Any], mode: object = None, *, known: KnownSymbols | None = None
) -> Ok[dict[Hashable, Any]] | Err:
    return capture(convert_keys, mapping, mode, known=known)


def try_convert_keys_deep(
    mapping: Mapping[Any, Any], mode: object = None, *, known: KnownSymbols | None = None
) -> Ok[dict[Hashable, Any]] | Err:
    return capture(convert_keys_deep, mapping, mode, known=known)
