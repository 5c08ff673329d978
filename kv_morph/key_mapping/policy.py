"""Key-conversion policies applied by the traversal engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Container, Hashable, Iterable
from typing import override

from kv_morph.errors import TypeMismatchError

from .symbols import DEFAULT_REGISTRY, Symbol


KnownSymbols = Container[str] | Callable[[str], bool]


class KeyPolicy(ABC):
    """Decide what a single mapping key becomes."""

    @abstractmethod
    def convert(self, key: Hashable) -> Hashable:
        """Return the converted key, or ``key`` itself when it is left alone."""

    @property
    def is_identity(self) -> bool:
        """True when ``convert`` can never change a key."""
        return False

    def __call__(self, key: Hashable) -> Hashable:
        return self.convert(key)


class AtomizePolicy(KeyPolicy):
    """Convert every string key to its symbol."""

    @override
    def convert(self, key: Hashable) -> Hashable:
        if isinstance(key, str):
            return Symbol(key)
        return key

    @override
    def __repr__(self) -> str:
        return "AtomizePolicy()"


class SafePolicy(KeyPolicy):
    """Convert a string key only when it already names a known symbol."""

    def __init__(self, known: KnownSymbols = DEFAULT_REGISTRY) -> None:
        super().__init__()
        if isinstance(known, (str, bytes)):
            msg = "known must be a container of names or a predicate, not a single string"
            raise TypeError(msg)
        if isinstance(known, Container):
            self._is_known: Callable[[str], bool] = known.__contains__
        elif callable(known):
            self._is_known = known
        else:
            msg = "known must be a container of names or a predicate"
            raise TypeError(msg)
        self.known = known

    @override
    def convert(self, key: Hashable) -> Hashable:
        if isinstance(key, str) and self._is_known(key):
            return Symbol(key)
        return key

    @override
    def __repr__(self) -> str:
        return f"SafePolicy(known={self.known!r})"


class AllowListPolicy(KeyPolicy):
    """Convert a string key only when the caller listed it."""

    def __init__(self, allowed: Iterable[str]) -> None:
        super().__init__()
        if isinstance(allowed, (str, bytes)):
            msg = "allowed must be an iterable of names, not a single string"
            raise TypeError(msg)
        self.allowed = frozenset(allowed)

    @property
    @override
    def is_identity(self) -> bool:
        return not self.allowed

    @override
    def convert(self, key: Hashable) -> Hashable:
        if isinstance(key, str) and key in self.allowed:
            return Symbol(key)
        return key

    @override
    def __repr__(self) -> str:
        return f"AllowListPolicy({sorted(self.allowed)!r})"


def resolve_policy(mode: object = None, *, known: KnownSymbols | None = None) -> KeyPolicy:
    """Build a policy from the call-site ``mode``.

    ``None`` converts unconditionally, ``"safe"`` consults ``known`` (the
    default registry when omitted), a ``KeyPolicy`` is used as given, and any
    other iterable of names becomes an allow-list.
    """
    if mode is None:
        return AtomizePolicy()
    if isinstance(mode, KeyPolicy):
        return mode
    if mode == "safe":
        return SafePolicy(DEFAULT_REGISTRY if known is None else known)
    if isinstance(mode, Iterable) and not isinstance(mode, (str, bytes)):
        names = list(mode)
        if all(isinstance(name, str) for name in names):
            return AllowListPolicy(names)
    raise TypeMismatchError.expected("a key policy, 'safe' or an iterable of names", mode)
