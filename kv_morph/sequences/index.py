"""Building a mapping keyed by a function of each element."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

from kv_morph.errors import ApplyFailureError, TypeMismatchError
from kv_morph.result import Err, Ok, capture


_T = TypeVar("_T")


def index_by(items: Iterable[_T], key_func: Callable[[_T], Hashable]) -> dict[Hashable, _T]:
    """Map ``key_func(item)`` to ``item`` for each element; later elements win."""
    if not isinstance(items, Iterable) or isinstance(items, (str, bytes, bytearray, Mapping)):
        raise TypeMismatchError.expected("a list or tuple", items)

    indexed: dict[Hashable, _T] = {}
    try:
        for item in items:
            indexed[key_func(item)] = item
    except Exception as exc:
        msg = f"unable to apply {key_func!r} to each of {items!r}"
        raise ApplyFailureError(msg, {"function": repr(key_func)}) from exc
    return indexed


def try_index_by(items: Iterable[Any], key_func: Callable[[Any], Hashable]) -> Ok[dict[Hashable, Any]] | Err:
    return capture(index_by, items, key_func)
