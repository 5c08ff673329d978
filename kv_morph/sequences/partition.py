"""Balanced partitioning of a sequence into a fixed number of buckets."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from kv_morph.errors import InvalidPartitionCountError, TypeMismatchError
from kv_morph.result import Err, Ok, capture


_T = TypeVar("_T")

logger = logging.getLogger(__name__)


def _chunk(items: Sequence[_T], size: int) -> list[list[_T]]:
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def _validate(items: object, k: object) -> None:
    if not isinstance(items, Sequence) or isinstance(items, (str, bytes, bytearray, Mapping)):
        raise TypeMismatchError.expected("a sequence", items)
    if isinstance(k, bool) or not isinstance(k, int):
        msg = f"bucket count must be an integer, got: {k!r}"
        raise InvalidPartitionCountError(msg, {"k": repr(k)})
    if k <= 0:
        msg = f"bucket count must be positive, got: {k}"
        raise InvalidPartitionCountError(msg, {"k": repr(k)})


def _redistribute(extra: list[list[_T]], buckets: list[list[_T]]) -> list[list[_T]]:
    # Each overflow element goes in front of the bucket at the head of the
    # rotation, which then moves to the tail.
    rotation = deque(buckets)
    for chunk in extra:
        for item in chunk:
            head = rotation.popleft()
            rotation.append([item, *head])
    return list(rotation)


def partition(items: Sequence[_T], k: int) -> list[list[_T]]:
    """Split ``items`` into exactly ``k`` buckets whose sizes differ by at most one.

    When ``items`` has fewer than ``k`` elements, each element gets its own
    bucket and the rest are empty. Otherwise ``items`` is cut into chunks of
    ``len(items) // k``; the first ``k`` chunks are the buckets and the
    elements of the trailing chunks are prepended to them in rotation, which
    also rotates the order of the returned buckets.

    >>> partition([1, 2, 3, 4, 5, 6], 4)
    [[3], [4], [5, 1], [6, 2]]
    """
    _validate(items, k)
    size, remainder = divmod(len(items), k)
    logger.debug("partitioning %d items into %d buckets (size=%d, remainder=%d)", len(items), k, size, remainder)

    if size == 0:
        return [[item] for item in items] + [[] for _ in range(k - len(items))]
    if remainder == 0:
        return _chunk(items, size)

    chunks = _chunk(items, size)
    return _redistribute(chunks[k:], chunks[:k])


def try_partition(items: Sequence[Any], k: int) -> Ok[list[list[Any]]] | Err:
    return capture(partition, items, k)
