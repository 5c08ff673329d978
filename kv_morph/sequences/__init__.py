"""Sequence transforms: balanced partitioning and keyed indexing."""

from .index import index_by, try_index_by
from .partition import partition, try_partition


__all__ = ["index_by", "partition", "try_index_by", "try_partition"]
