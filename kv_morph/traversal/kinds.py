"""Classification of values into the kinds the traversal engine dispatches on."""

from __future__ import annotations

import dataclasses
from abc import ABC
from collections.abc import Mapping
from enum import Enum

from kv_morph.errors import TypeMismatchError


class Record(ABC):  # noqa: B024
    """Marker for structured values that transforms must treat atomically.

    Subclass it or call ``Record.register(cls)`` for classes, mapping-like or
    not, whose instances must never be traversed, flattened or stripped.
    """


class ValueKind(Enum):
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OPAQUE = "opaque"


def is_opaque(value: object) -> bool:
    """Return True for records, dataclass instances and named tuples."""
    if isinstance(value, Record):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(value, "_fields")


def classify(value: object) -> ValueKind:
    if is_opaque(value):
        return ValueKind.OPAQUE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def is_empty_mapping(value: object) -> bool:
    """True for a zero-length mapping that is not an opaque record."""
    return classify(value) is ValueKind.MAPPING and len(value) == 0  # type: ignore[arg-type]


def require_mapping(value: object) -> Mapping:
    if not isinstance(value, Mapping) or is_opaque(value):
        raise TypeMismatchError.expected("a mapping", value)
    return value
