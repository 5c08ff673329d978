"""Structural traversal: key conversion, compaction and flattening."""

from .compact import compact, compact_deep, try_compact, try_compact_deep
from .flatten import flatten, try_flatten
from .keys import convert_keys, convert_keys_deep, try_convert_keys, try_convert_keys_deep
from .kinds import Record, ValueKind, classify


__all__ = [
    "Record",
    "ValueKind",
    "classify",
    "compact",
    "compact_deep",
    "convert_keys",
    "convert_keys_deep",
    "flatten",
    "try_compact",
    "try_compact_deep",
    "try_convert_keys",
    "try_convert_keys_deep",
    "try_flatten",
]
