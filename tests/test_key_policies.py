import pytest

from kv_morph.errors import TypeMismatchError
from kv_morph.key_mapping import (
    DEFAULT_REGISTRY,
    AllowListPolicy,
    AtomizePolicy,
    SafePolicy,
    Symbol,
    SymbolRegistry,
    resolve_policy,
)
from kv_morph.traversal import convert_keys


def test_symbol_is_distinct_from_string_key() -> None:
    assert Symbol("a") == Symbol("a")
    assert Symbol("a") != "a"
    assert len({Symbol("a"), "a"}) == 2
    assert str(Symbol("a")) == "a"


def test_symbol_rejects_non_string_name() -> None:
    with pytest.raises(TypeError, match="symbol name must be a string"):
        _ = Symbol(1)  # type: ignore[arg-type]


def test_registry_is_append_only_and_interns_once() -> None:
    registry = SymbolRegistry(["a"])
    first = registry.intern("b")
    assert registry.intern("b") is first
    assert "a" in registry
    assert "b" in registry
    assert "c" not in registry
    assert registry.get("c") is None
    assert len(registry) == 2
    assert set(registry) == {Symbol("a"), Symbol("b")}


def test_registry_membership_ignores_non_strings() -> None:
    registry = SymbolRegistry(["a"])
    assert Symbol("a") not in registry
    assert 1 not in registry


def test_atomize_policy_converts_only_strings() -> None:
    policy = AtomizePolicy()
    assert policy("key") == Symbol("key")
    assert policy(1) == 1
    assert policy(Symbol("key")) == Symbol("key")
    assert not policy.is_identity


def test_safe_policy_with_container_and_predicate() -> None:
    by_registry = SafePolicy(SymbolRegistry(["existing"]))
    assert by_registry("existing") == Symbol("existing")
    assert by_registry("missing") == "missing"

    by_predicate = SafePolicy(lambda name: name.startswith("ok_"))
    assert by_predicate("ok_key") == Symbol("ok_key")
    assert by_predicate("other") == "other"


def test_safe_policy_rejects_unusable_known() -> None:
    with pytest.raises(TypeError, match="known must be a container of names or a predicate"):
        _ = SafePolicy(42)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="not a single string"):
        _ = SafePolicy("abc")
    with pytest.raises(TypeError, match="not a single string"):
        _ = SafePolicy(b"abc")  # type: ignore[arg-type]


def test_allow_list_policy() -> None:
    policy = AllowListPolicy(["allowed"])
    assert policy("allowed") == Symbol("allowed")
    assert policy("other") == "other"
    assert not policy.is_identity
    assert AllowListPolicy([]).is_identity


def test_allow_list_policy_rejects_single_string() -> None:
    with pytest.raises(TypeError, match="not a single string"):
        _ = AllowListPolicy("allowed")


def test_resolve_policy_modes() -> None:
    assert isinstance(resolve_policy(), AtomizePolicy)
    assert isinstance(resolve_policy(["a"]), AllowListPolicy)
    assert isinstance(resolve_policy(("a", "b")), AllowListPolicy)

    safe = resolve_policy("safe")
    assert isinstance(safe, SafePolicy)
    assert safe.known is DEFAULT_REGISTRY

    registry = SymbolRegistry()
    assert resolve_policy("safe", known=registry).known is registry  # type: ignore[attr-defined]

    policy = AtomizePolicy()
    assert resolve_policy(policy) is policy


@pytest.mark.parametrize("mode", ["unsafe", 3, [1, 2]])
def test_resolve_policy_rejects_unknown_modes(mode: object) -> None:
    with pytest.raises(TypeMismatchError, match="expected a key policy"):
        _ = resolve_policy(mode)


def test_safe_mode_rejects_string_as_known() -> None:
    with pytest.raises(TypeError, match="not a single string"):
        _ = convert_keys({"a": 1}, "safe", known="abc")
