"""Symbolic keys and the policies that produce them."""

from .policy import AllowListPolicy, AtomizePolicy, KeyPolicy, SafePolicy, resolve_policy
from .symbols import DEFAULT_REGISTRY, Symbol, SymbolRegistry


__all__ = [
    "DEFAULT_REGISTRY",
    "AllowListPolicy",
    "AtomizePolicy",
    "KeyPolicy",
    "SafePolicy",
    "Symbol",
    "SymbolRegistry",
    "resolve_policy",
]
