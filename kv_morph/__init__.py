"""kv-morph - structural transforms over nested mappings and sequences"""

from ._version import version as __version__
from .errors import ApplyFailureError, InvalidPartitionCountError, MorphError, TypeMismatchError
from .key_mapping import (
    DEFAULT_REGISTRY,
    AllowListPolicy,
    AtomizePolicy,
    KeyPolicy,
    SafePolicy,
    Symbol,
    SymbolRegistry,
)
from .result import Err, Ok
from .sequences import index_by, partition, try_index_by, try_partition
from .traversal import (
    Record,
    compact,
    compact_deep,
    convert_keys,
    convert_keys_deep,
    flatten,
    try_compact,
    try_compact_deep,
    try_convert_keys,
    try_convert_keys_deep,
    try_flatten,
)


__all__ = [
    "DEFAULT_REGISTRY",
    "AllowListPolicy",
    "ApplyFailureError",
    "AtomizePolicy",
    "Err",
    "InvalidPartitionCountError",
    "KeyPolicy",
    "MorphError",
    "Ok",
    "Record",
    "SafePolicy",
    "Symbol",
    "SymbolRegistry",
    "TypeMismatchError",
    "__version__",
    "compact",
    "compact_deep",
    "convert_keys",
    "convert_keys_deep",
    "flatten",
    "index_by",
    "partition",
    "try_compact",
    "try_compact_deep",
    "try_convert_keys",
    "try_convert_keys_deep",
    "try_flatten",
    "try_index_by",
    "try_partition",
]
