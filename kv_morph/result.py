"""Tagged results for the non-raising form of each operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from kv_morph.errors import MorphError


if TYPE_CHECKING:
    from collections.abc import Callable


_T = TypeVar("_T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Ok(Generic[_T]):
    """Successful outcome wrapping the computed value."""

    value: _T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> _T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome wrapping the structured error."""

    error: MorphError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        """Re-raise the stored error."""
        raise self.error

    def to_dict(self) -> dict[str, Any]:
        return self.error.to_dict()


def capture(func: Callable[..., _T], *args: Any, **kwargs: Any) -> Ok[_T] | Err:
    """Call ``func`` and report a ``MorphError`` as ``Err`` instead of raising it.

    Any other exception propagates unchanged.
    """
    try:
        return Ok(func(*args, **kwargs))
    except MorphError as exc:
        logger.debug("%s failed: %s", getattr(func, "__name__", func), exc)
        return Err(exc)
