"""Error taxonomy shared by every transform."""

from __future__ import annotations

from typing import Any


E_TYPE_MISMATCH = "E_TYPE_MISMATCH"
E_APPLY_FAILURE = "E_APPLY_FAILURE"
E_INVALID_PARTITION_COUNT = "E_INVALID_PARTITION_COUNT"


class MorphError(Exception):
    """Base class for failures reported by kv-morph operations."""

    code = "E_MORPH"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
        }


class TypeMismatchError(MorphError, TypeError):
    """The top-level argument is not the expected mapping or sequence kind."""

    code = E_TYPE_MISMATCH

    @classmethod
    def expected(cls, expected: str, got: object) -> TypeMismatchError:
        msg = f"expected {expected}, got: {got!r}"
        return cls(msg, {"expected": expected, "got": type(got).__name__})


class ApplyFailureError(MorphError):
    """A caller-supplied key function failed on one of the elements."""

    code = E_APPLY_FAILURE


class InvalidPartitionCountError(MorphError, ValueError):
    """The requested bucket count is not a positive integer."""

    code = E_INVALID_PARTITION_COUNT
