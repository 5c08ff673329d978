"""Symbolic keys and the append-only registry of known symbols."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Symbol:
    """Interned-style key that never compares equal to a plain string."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            msg = f"symbol name must be a string, got: {self.name!r}"
            raise TypeError(msg)

    def __str__(self) -> str:
        return self.name


class SymbolRegistry:
    """Append-only set of symbol names known to the process.

    Transforms only ever read a registry; callers grow it with ``intern``.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        super().__init__()
        self._symbols: dict[str, Symbol] = {}
        for name in names:
            _ = self.intern(name)

    def intern(self, name: str) -> Symbol:
        """Return the symbol for ``name``, registering it on first use."""
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol(name)
            self._symbols[name] = symbol
        return symbol

    def get(self, name: str) -> Symbol | None:
        """Return the existing symbol for ``name`` or None."""
        return self._symbols.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolRegistry({sorted(self._symbols)!r})"


DEFAULT_REGISTRY = SymbolRegistry()
